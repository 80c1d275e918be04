"""Format-preserving reader/writer for osu!'s key/value text files.

osu!.<user>.cfg is a flat list of `Key = Value` lines with no section header,
while osu!switcher.ini groups `Username`/`Password` pairs under one
`[server]` section each. Both are handled by IniDocument: lines before the
first header belong to the unnamed section (``None``).

Comments, blank lines, key order, unknown keys, the line terminator (osu!
writes CRLF on Windows) and a leading UTF-8 BOM survive a load/dump cycle, so
rewriting three credential fields never disturbs the rest of the user's
settings. Whitespace around keys and values is normalized.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path

COMMENT_PREFIXES = ("#", ";")
BOM = "\ufeff"


class IniParseError(ValueError):
    """Raised when a line is neither a section header, key/value pair, nor comment."""

    def __init__(self, line_number: int, line: str) -> None:
        self.line_number = line_number
        self.line = line
        super().__init__(f"line {line_number}: cannot parse {line!r}")


@dataclass
class _Entry:
    key: str | None  # None for comments and blank lines
    value: str = ""
    raw: str = ""
    separator: str = "="


@dataclass
class _Section:
    name: str | None
    entries: list[_Entry] = field(default_factory=list)

    def find(self, key: str) -> _Entry | None:
        for entry in self.entries:
            if entry.key == key:
                return entry
        return None


class IniDocument:
    """In-memory, order-preserving view of an INI-style file.

    Args:
        separator: Separator used when writing keys that were not in the
            original text (e.g. " = " for osu!'s own config)
    """

    def __init__(self, separator: str = "=") -> None:
        self._separator = separator
        self._sections: list[_Section] = [_Section(name=None)]
        self._newline = "\n"
        self._bom = False

    @classmethod
    def loads(cls, text: str, separator: str = "=") -> "IniDocument":
        doc = cls(separator=separator)
        if text.startswith(BOM):
            doc._bom = True
            text = text[len(BOM) :]
        if "\r\n" in text:
            doc._newline = "\r\n"
        current = doc._sections[0]

        for line_number, raw_line in enumerate(text.splitlines(), start=1):
            line = raw_line.strip()
            if not line or line.startswith(COMMENT_PREFIXES):
                current.entries.append(_Entry(key=None, raw=raw_line))
                continue

            if line.startswith("["):
                if not line.endswith("]") or len(line) < 3:
                    raise IniParseError(line_number, raw_line)
                name = line[1:-1].strip()
                existing = doc._find_section(name)
                if existing is None:
                    existing = _Section(name=name)
                    doc._sections.append(existing)
                current = existing
                continue

            if "=" not in line:
                raise IniParseError(line_number, raw_line)

            # Split on the first "=" only; encrypted passwords end in base64 padding
            key_part, value_part = raw_line.split("=", 1)
            key = key_part.strip()
            if not key:
                raise IniParseError(line_number, raw_line)
            separator = "=" if not key_part.endswith(" ") else " = "

            entry = current.find(key)
            if entry is None:
                current.entries.append(
                    _Entry(key=key, value=value_part.strip(), separator=separator)
                )
            else:
                entry.value = value_part.strip()

        return doc

    @classmethod
    def load(cls, path: Path, separator: str = "=") -> "IniDocument":
        """Parse the file at `path`. Raises OSError, IniParseError or UnicodeDecodeError."""
        # Decode bytes directly so CRLF is not translated away
        return cls.loads(path.read_bytes().decode("utf-8"), separator=separator)

    def _find_section(self, name: str | None) -> _Section | None:
        for section in self._sections:
            if section.name == name:
                return section
        return None

    def section_names(self) -> list[str]:
        """Named sections in file order (the unnamed section is excluded)."""
        return [s.name for s in self._sections if s.name is not None]

    def get(self, section: str | None, key: str) -> str | None:
        found = self._find_section(section)
        if found is None:
            return None
        entry = found.find(key)
        if entry is None:
            return None
        return entry.value

    def set(self, section: str | None, key: str, value: str) -> None:
        """Set `key` in `section`, creating either as needed."""
        found = self._find_section(section)
        if found is None:
            found = _Section(name=section)
            self._sections.append(found)

        entry = found.find(key)
        if entry is None:
            # Insert before trailing blank lines so sections stay visually grouped
            insert_at = len(found.entries)
            while insert_at > 0 and found.entries[insert_at - 1].key is None:
                insert_at -= 1
            found.entries.insert(insert_at, _Entry(key=key, value=value, separator=self._separator))
        else:
            entry.value = value

    def dumps(self) -> str:
        lines: list[str] = []
        for section in self._sections:
            if section.name is not None:
                if lines and lines[-1].strip():
                    lines.append("")
                lines.append(f"[{section.name}]")
            for entry in section.entries:
                if entry.key is None:
                    lines.append(entry.raw)
                else:
                    lines.append(f"{entry.key}{entry.separator}{entry.value}")
        if not lines:
            return ""
        return self._newline.join(lines) + self._newline

    def write(self, path: Path) -> None:
        """Write atomically: dump to a sibling temp file, then rename over `path`."""
        temp_path = path.with_name(path.name + ".tmp")
        with temp_path.open("w", encoding="utf-8", newline="") as f:
            f.write((BOM if self._bom else "") + self.dumps())
            f.flush()
            os.fsync(f.fileno())
        temp_path.replace(path)
