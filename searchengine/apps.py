from __future__ import annotations

import threading

from django.apps import AppConfig


class SearchEngineConfig(AppConfig):
    """Configuration for the searchengine Django app.

    The app config owns the process-wide :class:`GraphService`; it is
    created on first use so that management commands which never touch it
    do not read the data files.
    """

    name = 'searchengine'
    verbose_name = 'Search engine'

    def ready(self) -> None:
        self._service = None
        self._service_lock = threading.Lock()

    @property
    def graph_service(self):
        from .services import load_service_from_settings

        with self._service_lock:
            if self._service is None:
                self._service = load_service_from_settings()
            return self._service

    def reset_graph_service(self, service=None) -> None:
        """Replace (or drop) the shared service; used by tests and reloads."""

        with self._service_lock:
            self._service = service
