"""Hash text, bytes, files or URLs, optionally on a background thread."""

from __future__ import annotations

import hashlib
import io
import logging
import os
import threading
import urllib.request
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, BinaryIO, Optional, Union
from urllib.parse import urlsplit
from urllib.request import url2pathname

from .signals import Signal

_log = logging.getLogger(__name__)

_CHUNK_SIZE = 4 * 1024 * 1024


class Algorithm(Enum):
    MD5 = "md5"
    SHA1 = "sha1"
    SHA224 = "sha224"
    SHA256 = "sha256"
    SHA384 = "sha384"
    SHA512 = "sha512"
    SHA3_224 = "sha3_224"
    SHA3_256 = "sha3_256"
    SHA3_384 = "sha3_384"
    SHA3_512 = "sha3_512"
    BLAKE2B = "blake2b"
    BLAKE2S = "blake2s"

    def new(self) -> Any:
        return hashlib.new(self.value)

    @property
    def digest_size(self) -> int:
        return self.new().digest_size


@dataclass
class _Job:
    stop: threading.Event = field(default_factory=threading.Event)
    thread: Optional[threading.Thread] = None


def _local_path(source: Union[str, os.PathLike]) -> Optional[str]:
    if isinstance(source, os.PathLike):
        return os.fspath(source)
    parts = urlsplit(source)
    if parts.scheme == "file":
        return url2pathname(parts.path)
    if len(parts.scheme) <= 1:
        return source
    return None


def _fetch(url: str) -> bytes:
    with urllib.request.urlopen(url) as response:
        return response.read()


def _hex_upper(digest: Any) -> str:
    return digest.hexdigest().upper()


class AsyncHasher:
    """Computes an upper-case hex digest of whichever source was set last.

    In asynchronous mode the digest is computed on a worker thread and the
    progress, hash value and finished signals are emitted from that thread.
    """

    def __init__(self, algorithm: Algorithm = Algorithm.MD5, asynchronous: bool = True) -> None:
        self.algorithm_changed = Signal()
        self.asynchronous_changed = Signal()
        self.hash_value_changed = Signal()
        self.hash_length_changed = Signal()
        self.source_changed = Signal()
        self.source_text_changed = Signal()
        self.source_data_changed = Signal()
        self.source_object_changed = Signal()
        self.hash_progress = Signal()
        self.started = Signal()
        self.finished = Signal()

        self._algorithm = Algorithm(algorithm)
        self._asynchronous = asynchronous
        self._hash_value = ""
        self._source: Optional[Union[str, os.PathLike]] = None
        self._source_text = ""
        self._source_data = b""
        self._source_object: Any = None
        self._error: Optional[BaseException] = None
        self._job: Optional[_Job] = None
        self._lock = threading.RLock()

    @property
    def algorithm(self) -> Algorithm:
        return self._algorithm

    @algorithm.setter
    def algorithm(self, algorithm: Algorithm) -> None:
        algorithm = Algorithm(algorithm)
        if algorithm != self._algorithm:
            self._algorithm = algorithm
            self.algorithm_changed.emit()
            self.hash_length_changed.emit()

    @property
    def asynchronous(self) -> bool:
        return self._asynchronous

    @asynchronous.setter
    def asynchronous(self, value: bool) -> None:
        if value != self._asynchronous:
            self._asynchronous = value
            self.asynchronous_changed.emit()

    @property
    def hash_value(self) -> str:
        return self._hash_value

    @property
    def hash_length(self) -> int:
        return self._algorithm.digest_size

    @property
    def error(self) -> Optional[BaseException]:
        """The last error raised on a worker thread, if any."""
        return self._error

    @property
    def source(self) -> Optional[Union[str, os.PathLike]]:
        return self._source

    @source.setter
    def source(self, source: Optional[Union[str, os.PathLike]]) -> None:
        if source == self._source:
            return
        self._source = source
        self.source_changed.emit()
        self.cancel()
        if source is None:
            return

        path = _local_path(source)
        if path is not None:
            stream = open(path, "rb")
            total = os.fstat(stream.fileno()).st_size
            self.started.emit()
            if self._asynchronous:
                self._launch(self._digest_stream, stream, total)
            else:
                with stream:
                    digest = self._algorithm.new()
                    for chunk in iter(lambda: stream.read(_CHUNK_SIZE), b""):
                        digest.update(chunk)
                self._set_hash_value(_hex_upper(digest))
        else:
            url = os.fspath(source)
            self.started.emit()
            if self._asynchronous:
                self._launch(self._fetch_and_digest, url)
            else:
                data = _fetch(url)
                self._set_hash_value(_hex_upper(hashlib.new(self._algorithm.value, data)))

    @property
    def source_text(self) -> str:
        return self._source_text

    @source_text.setter
    def source_text(self, text: str) -> None:
        if text == self._source_text:
            return
        self._source_text = text
        self.source_text_changed.emit()
        self._hash_bytes(text.encode("utf-8"))

    @property
    def source_data(self) -> bytes:
        return self._source_data

    @source_data.setter
    def source_data(self, data: bytes) -> None:
        data = bytes(data)
        if data == self._source_data:
            return
        self._source_data = data
        self.source_data_changed.emit()
        self._hash_bytes(data)

    @property
    def source_object(self) -> Any:
        return self._source_object

    @source_object.setter
    def source_object(self, obj: Any) -> None:
        if obj is self._source_object:
            return
        self._source_object = obj
        self.source_object_changed.emit()
        self.started.emit()
        identity = str(id(obj)).encode("ascii")
        self._set_hash_value(_hex_upper(hashlib.new(self._algorithm.value, identity)))

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Wait for the running job; return True once none is running."""
        job = self._job
        if job is None or job.thread is None:
            return True
        job.thread.join(timeout)
        return not job.thread.is_alive()

    def cancel(self) -> None:
        """Stop the running job; its result is discarded."""
        with self._lock:
            if self._job is not None:
                self._job.stop.set()
                self._job = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AsyncHasher):
            return NotImplemented
        return self._hash_value == other._hash_value

    __hash__ = None  # type: ignore[assignment]

    def _hash_bytes(self, data: bytes) -> None:
        self.cancel()
        self.started.emit()
        if self._asynchronous:
            self._launch(self._digest_stream, io.BytesIO(data), len(data))
        else:
            self._set_hash_value(_hex_upper(hashlib.new(self._algorithm.value, data)))

    def _launch(self, target: Any, *args: Any) -> None:
        job = _Job()
        job.thread = threading.Thread(
            target=target, args=(*args, self._algorithm, job.stop), daemon=True
        )
        with self._lock:
            self._job = job
        job.thread.start()

    def _digest_stream(
        self, stream: BinaryIO, total: int, algorithm: Algorithm, stop: threading.Event
    ) -> None:
        with stream:
            digest = algorithm.new()
            processed = 0
            for chunk in iter(lambda: stream.read(_CHUNK_SIZE), b""):
                if stop.is_set():
                    return
                digest.update(chunk)
                processed += len(chunk)
                self.hash_progress.emit(processed, total)
        with self._lock:
            if not stop.is_set():
                self._set_hash_value(_hex_upper(digest))

    def _fetch_and_digest(self, url: str, algorithm: Algorithm, stop: threading.Event) -> None:
        try:
            data = _fetch(url)
        except OSError as exc:
            self._error = exc
            _log.warning("HTTP request error: %s", exc)
            return
        if stop.is_set():
            return
        self._digest_stream(io.BytesIO(data), len(data), algorithm, stop)

    def _set_hash_value(self, value: str) -> None:
        self._hash_value = value
        self.hash_value_changed.emit()
        self.finished.emit()