"""
Catalog Load Background Worker

Loads the railway catalog off the UI thread. The window keeps its
controls disabled until ``load_completed`` is emitted.
"""

import logging
import time
from typing import Optional

from PySide6.QtCore import QObject, QThread, Signal

from ...core.interfaces.i_catalog_repository import ICatalogRepository
from ...core.services.flat_file_repository import CatalogLoadError

logger = logging.getLogger(__name__)


class CatalogLoadWorker(QThread):
    """
    Background worker for loading the catalog.

    Emits exactly one of ``load_completed`` or ``load_failed`` per run.
    """

    # Signals
    load_started = Signal()
    load_completed = Signal(object)  # Catalog
    load_failed = Signal(str)  # error message

    def __init__(self, repository: ICatalogRepository, parent: Optional[QObject] = None):
        """
        Initialize the catalog load worker.

        Args:
            repository: Repository used to load the catalog
            parent: Parent QObject
        """
        super().__init__(parent)
        self.repository = repository

    def run(self):
        """Main worker thread execution."""
        logger.info("Starting background catalog loading")
        self.load_started.emit()
        start_time = time.time()

        try:
            catalog = self.repository.load_catalog()
        except CatalogLoadError as e:
            logger.error(f"Catalog load failed: {e}")
            self.load_failed.emit(f"Error loading file: {e}")
            return
        except Exception as e:
            logger.exception("Unexpected error while loading catalog")
            self.load_failed.emit(f"Unexpected error loading data: {e}")
            return

        logger.info(f"Background catalog loading completed in {time.time() - start_time:.3f}s")
        self.load_completed.emit(catalog)
