"""Signal-aware output writing for the fstree CLI."""

import errno
import sys
import types
from pathlib import Path
from typing import Optional, TextIO, Type, Union

from fstree.cli.signal_handler import signal_handler


class SafeWriter:
    """Writes rendered output to stdout or a file, stopping cleanly on a closed pipe.

    A destination path is opened (and truncated) only when the writer is created, which
    the CLI does after the tree has been built and rendered, so a fatal error never
    leaves a partial output file behind.

    Attributes:
        destination: ``None`` for stdout, otherwise the output file path.

    Example:
        >>> with SafeWriter(None) as writer:  # doctest: +SKIP
        ...     writer.write("project/\\n")
    """

    def __init__(self, destination: Union[None, str, Path] = None, stream: Optional[TextIO] = None):
        """Initialize the safe writer.

        Args:
            destination: Output file path, or None to write to ``stream``.
            stream: Stream used when destination is None. Defaults to sys.stdout at
                construction time.
        """
        self.destination = Path(destination) if destination is not None else None
        self._closed = False
        self._owns_stream = self.destination is not None
        if self.destination is not None:
            self._stream: TextIO = self.destination.open("w", encoding="utf-8")
        else:
            self._stream = stream if stream is not None else sys.stdout

    def write(self, data: str) -> None:
        """Write data unless an interruption has been recorded.

        Raises:
            BrokenPipeError: If SIGPIPE/SIGINT was received or the pipe is closed.
            OSError: For any other I/O error.
            ValueError: If the writer has been closed.
        """
        if self._closed:
            raise ValueError("Cannot write to closed SafeWriter")
        if signal_handler.interrupted:
            raise BrokenPipeError()

        try:
            self._stream.write(data)
            self._stream.flush()
        except OSError as e:
            if e.errno == errno.EPIPE:
                signal_handler.sigpipe_received.set()
                raise BrokenPipeError()
            raise

    def close(self) -> None:
        """Close the destination file if this writer opened it. Safe to call twice."""
        if self._closed:
            return
        self._closed = True
        if self._owns_stream:
            try:
                self._stream.close()
            except OSError as e:
                if e.errno != errno.EPIPE:
                    raise

    def __enter__(self) -> "SafeWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        try:
            self.close()
        except OSError:
            # An exception from the with block takes priority over one from close()
            if exc_type is None:
                raise
