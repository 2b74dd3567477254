"""Composite pattern: folders and files treated as one kind of entity."""

from __future__ import annotations


class UnsupportedOperation(Exception):
    """Raised when an entity is asked for something only another kind supports."""


class FileSystemEntity:
    """An item in a file system tree; every operation is refused unless overridden."""

    @property
    def name(self) -> str:
        raise UnsupportedOperation("Unimplemented")

    @property
    def extension(self) -> str:
        raise UnsupportedOperation("Unimplemented")

    def add(self, entity: FileSystemEntity) -> None:
        raise UnsupportedOperation("Unimplemented")

    def search(self, name: str) -> FileSystemEntity | None:
        raise UnsupportedOperation("Unimplemented")

    def read_content(self) -> str:
        raise UnsupportedOperation("Unimplemented")

    def write_content(self, content: str) -> None:
        raise UnsupportedOperation("Unimplemented")

    def print_info(self) -> str:
        raise UnsupportedOperation("Unimplemented")


class Folder(FileSystemEntity):
    """A named container of other entities."""

    def __init__(self, name: str) -> None:
        self._name = name
        self.entities: list[FileSystemEntity] = []

    @property
    def name(self) -> str:
        return self._name

    def add(self, entity: FileSystemEntity) -> None:
        self.entities.append(entity)

    def search(self, name: str) -> FileSystemEntity | None:
        """Return the first direct child with the given name, or None."""
        return next((entity for entity in self.entities if entity.name == name), None)

    def print_info(self) -> str:
        """Print this folder and everything below it; return the printed text."""
        header = "\n".join(
            ["--- Folder ---", f"Name: {self._name}", f"Item count : {len(self.entities)}"]
        )
        print(header)
        parts = [header]
        parts.extend(entity.print_info() for entity in self.entities)
        return "\n".join(parts)


class File(FileSystemEntity):
    """A named file with an extension and text content."""

    def __init__(self, name: str, extension: str) -> None:
        self._name = name
        self._extension = extension
        self._content = ""

    @property
    def name(self) -> str:
        return f"{self._name}.{self._extension}"

    @property
    def extension(self) -> str:
        return self._extension

    def read_content(self) -> str:
        """Always an empty string; the stored content is shown by print_info."""
        return ""

    def write_content(self, content: str) -> None:
        """Append to the file's content."""
        self._content += content

    def print_info(self) -> str:
        text = "\n".join(
            [
                "--- File ---",
                f"Name: {self.name}",
                f"Content: {self._content}",
                f"Size: {len(self._content)}",
            ]
        )
        print(text)
        return text