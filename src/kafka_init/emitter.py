"""Init folder file output.

This module is the only place the init container writes to disk.
"""

from pathlib import Path

from kafka_init import console
from kafka_init.exceptions import WriteError
from kafka_init.models import GeneratedArtifact


class FileEmitter:
    """Writes generated artifacts into the init folder.

    Attributes:
        directory: The folder shared with the Kafka container.

    """

    def __init__(self, directory: str | Path) -> None:
        """Initialize FileEmitter.

        Args:
            directory: The folder the artifacts are written to.

        """
        self.directory: Path = Path(directory)

    def path_for(self, artifact: GeneratedArtifact) -> Path:
        """Return the target path of an artifact."""
        return self.directory / artifact.name.value

    def write_or_raise(self, artifact: GeneratedArtifact) -> Path:
        """Write an artifact, replacing any previous file.

        Args:
            artifact: The artifact to write.

        Returns:
            The path of the written file.

        Raises:
            WriteError: If the file cannot be written.

        """
        path = self.path_for(artifact)
        try:
            with path.open("w", encoding="utf-8", newline="") as f:
                f.write(artifact.content)
        except OSError as e:
            raise WriteError(f"Error writing {artifact.name.value} to {path}: {e}") from e
        return path

    def write(self, artifact: GeneratedArtifact) -> bool:
        """Write an artifact and report the outcome.

        Args:
            artifact: The artifact to write.

        Returns:
            True if the file was written, False otherwise.

        """
        try:
            path = self.write_or_raise(artifact)
        except WriteError as e:
            console.error(str(e))
            return False

        if artifact.name.sensitive:
            console.success(f"Information of length {len(artifact.content)} written successfully to file {path}")
        else:
            console.success(f"Information {artifact.content!r} written successfully to file {path}")
        return True


def write_artifact(directory: str | Path, artifact: GeneratedArtifact) -> bool:
    """Write an artifact into a directory.

    Args:
        directory: The target folder.
        artifact: The artifact to write.

    Returns:
        True if the file was written, False otherwise.

    """
    return FileEmitter(directory).write(artifact)
