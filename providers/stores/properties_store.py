"""Properties store for PropStore - thread-safe in-memory property list.

The store owns a single ``dict`` guarded by one lock. Every public method
takes the lock for its own duration only, so ``load`` and ``store`` are not
atomic as a whole: a concurrent ``set_property`` may land between two lines
of a load, or after the snapshot a store writes from.
"""

import codecs
import io
from contextlib import contextmanager
from pathlib import Path
from threading import Lock
from typing import Dict, Iterator, List, Optional, Sequence, TextIO, Union

from loguru import logger

from core.exceptions import ParsingError
from core.models import LineError, LoadReport
from core.types import LoadMode
from interfaces.settings import Stream
from providers.codec import format_line, join_values, parse_line, split_values


def is_text_stream(stream: Stream) -> bool:
    """Return True if stream reads and writes ``str`` rather than bytes."""
    if isinstance(stream, (io.TextIOBase, codecs.StreamReader, codecs.StreamWriter, codecs.StreamReaderWriter)):
        return True
    # Spooled temporary files and other wrappers only expose their mode
    return "b" not in getattr(stream, "mode", "b")


class PropertiesStore:
    """Property list backed by the ``.properties`` text format.

    Implements the ``Settings`` protocol. Instances may be shared between
    threads without external synchronization.
    """

    def __init__(self, encoding: str = "utf-8", load_mode: LoadMode = LoadMode.LENIENT):
        """Initialize an empty store.

        Args:
            encoding: Text encoding used for binary streams and files
            load_mode: How ``load`` treats data lines without a separator
        """
        self._properties: Dict[str, str] = {}
        self._lock = Lock()
        self.encoding = encoding
        self.load_mode = load_mode

        logger.debug(f"PropertiesStore initialized: encoding={encoding}, load_mode={load_mode.value}")

    def property(self, key: str) -> Optional[str]:
        """Search for the property with the specified key.

        Args:
            key: Property name

        Returns:
            The stored value, or None if the key is absent
        """
        with self._lock:
            return self._properties.get(key)

    def set_property(self, key: str, value: str) -> None:
        """Set key to value, creating the key if it does not exist."""
        with self._lock:
            self._properties[key] = value

    def property_slice(self, key: str) -> Optional[List[str]]:
        """Search for the property with the specified key and split it on ','.

        Args:
            key: Property name

        Returns:
            The list elements, untrimmed, or None if the key is absent
        """
        value = self.property(key)
        if value is None:
            return None
        return split_values(value)

    def set_property_slice(self, key: str, values: Sequence[str]) -> None:
        """Set key to the ','-joined values. An empty sequence stores ``""``."""
        self.set_property(key, join_values(values))

    def property_names(self) -> set[str]:
        """Return all keys currently in the store."""
        with self._lock:
            return set(self._properties)

    def load(self, stream: Stream) -> LoadReport:
        """Read a property list from a line-oriented input stream.

        Binary streams are decoded with the store's encoding. Existing
        entries that do not appear in the stream are kept.

        Args:
            stream: Readable binary or text stream

        Returns:
            Report of loaded, skipped and malformed lines

        Raises:
            ParsingError: On the first malformed line, in strict mode only
            OSError: If reading the stream fails
            UnicodeDecodeError: If the stream is not valid in the encoding
        """
        loaded = 0
        skipped = 0
        errors: List[LineError] = []

        with self._text_stream(stream) as text:
            for line_number, line in enumerate(text, start=1):
                try:
                    prop = parse_line(line, line_number)
                except ParsingError as e:
                    if self.load_mode is LoadMode.STRICT:
                        raise
                    logger.warning(f"Skipping malformed property line {line_number}: {e.reason}: {e.line!r}")
                    errors.append(LineError.from_parsing_error(e))
                    continue

                if prop is None:
                    skipped += 1
                    continue

                self.set_property(prop.key, prop.value)
                loaded += 1

        report = LoadReport(loaded=loaded, skipped=skipped, errors=tuple(errors))
        logger.debug(
            f"Loaded {report.loaded} properties "
            f"({report.skipped} skipped, {len(report.errors)} malformed)"
        )
        return report

    def load_from_file(self, path: Union[str, Path]) -> LoadReport:
        """Read a property list from a file.

        Raises:
            OSError: If the file cannot be opened or read
        """
        logger.debug(f"Loading properties from {path}")
        with open(path, "rb") as f:
            return self.load(f)

    def store(self, stream: Stream) -> None:
        """Write every property to an output stream, one line each.

        Text streams receive ``str``, binary streams receive the lines
        encoded as one continuous text in the store's encoding. Line order
        is unspecified.

        Raises:
            OSError: If a write fails; remaining lines are not written
        """
        with self._lock:
            snapshot = list(self._properties.items())

        with self._text_stream(stream) as text:
            for key, value in snapshot:
                text.write(format_line(key, value))

        logger.debug(f"Stored {len(snapshot)} properties")

    def store_to_file(self, path: Union[str, Path]) -> None:
        """Write every property to a file, creating or truncating it.

        Raises:
            OSError: If the file cannot be created or written
        """
        logger.debug(f"Storing properties to {path}")
        with open(path, "wb") as f:
            self.store(f)

    @contextmanager
    def _text_stream(self, stream: Stream) -> Iterator[TextIO]:
        """Yield a text view of stream, decoding or encoding binary streams.

        Lines are split on ``\\n`` only. The wrapper around a binary stream
        is detached on exit so the caller's stream stays open.
        """
        if is_text_stream(stream):
            yield stream
            return

        wrapper = io.TextIOWrapper(stream, encoding=self.encoding, newline="\n", write_through=True)
        try:
            yield wrapper
        finally:
            wrapper.detach()

    def __len__(self) -> int:
        """Return the number of properties."""
        with self._lock:
            return len(self._properties)

    def __contains__(self, key: object) -> bool:
        """Return True if key is in the store."""
        with self._lock:
            return key in self._properties

    def __repr__(self) -> str:
        return f"PropertiesStore(entries={len(self)}, encoding={self.encoding!r}, load_mode={self.load_mode.value})"
