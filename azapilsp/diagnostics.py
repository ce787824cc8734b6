"""Collection of diagnostics per file and their delivery to the client."""

from __future__ import annotations

import logging
import os
import queue
import threading
from pathlib import Path
from typing import Any, Iterable, Mapping, Protocol

from azapilsp.ranges import Diagnostic, HclDiagnostic, hcl_diags_to_lsp

PUBLISH_METHOD = "textDocument/publishDiagnostics"

_STOP = object()


class ClientNotifier(Protocol):
    def notify(self, method: str, params: Any) -> None: ...


class Diagnostics(dict):
    """Diagnostics keyed by filename, then by the source that produced them."""

    def empty_root_diagnostic(self) -> "Diagnostics":
        """Add an empty entry for the directory itself, clearing what was published for it."""
        self[""] = {}
        return self

    def append(self, source: str, diags_map: Mapping[str, Iterable[HclDiagnostic]]) -> "Diagnostics":
        for filename, file_diags in diags_map.items():
            self.setdefault(filename, {})[source] = list(file_diags)
        return self


def _uri_from_path(path: str) -> str:
    return Path(os.path.abspath(os.path.normpath(path))).as_uri()


class Notifier:
    """Queues diagnostics and sends them to the client from a background thread."""

    def __init__(
        self,
        client_notifier: ClientNotifier,
        logger: logging.Logger | None = None,
        maxsize: int = 50,
    ) -> None:
        self._client = client_notifier
        self._logger = logger or logging.getLogger(__name__)
        self._queue: queue.Queue = queue.Queue(maxsize)
        self._lock = threading.Lock()
        self._closed = False
        self._worker = threading.Thread(target=self._run, daemon=True)
        self._worker.start()

    @property
    def closed(self) -> bool:
        return self._closed

    def publish_hcl_diags(self, dir_path: str, diags: Diagnostics, cancelled: bool = False) -> None:
        """Queue one notification per file; a cancelled call closes the notifier instead."""
        if cancelled:
            self.close()
            return
        with self._lock:
            if self._closed:
                raise RuntimeError("notifier is closed")
            for filename, by_source in diags.items():
                file_diags: list[Diagnostic] = []
                for source, source_diags in by_source.items():
                    file_diags.extend(hcl_diags_to_lsp(source_diags, source))
                uri = _uri_from_path(os.path.join(dir_path, filename))
                self._queue.put((uri, file_diags))

    def close(self) -> None:
        """Stop accepting diagnostics and wait until queued ones are sent."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
            self._queue.put(_STOP)
        self._worker.join()

    def __enter__(self) -> "Notifier":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _run(self) -> None:
        while True:
            item = self._queue.get()
            if item is _STOP:
                return
            uri, file_diags = item
            params = {"uri": uri, "diagnostics": [d.to_dict() for d in file_diags]}
            try:
                self._client.notify(PUBLISH_METHOD, params)
            except Exception as exc:
                self._logger.error("Error pushing diagnostics: %s", exc)