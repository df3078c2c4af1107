"""
Unit tests for ServiceFactory.
"""

import pytest

from wellington_trains.core.services import (
    CatalogLoadError,
    CatalogService,
    FlatFileRepository,
    ServiceFactory,
)


class TestServiceFactory:
    """Test wiring of the repository and query service."""

    def test_repository_is_cached(self, data_dir):
        factory = ServiceFactory(str(data_dir))

        repository = factory.get_data_repository()

        assert isinstance(repository, FlatFileRepository)
        assert factory.get_data_repository() is repository

    def test_create_catalog_service_loads_catalog(self, data_dir):
        service = ServiceFactory(str(data_dir)).create_catalog_service()

        assert isinstance(service, CatalogService)
        assert service.line_names() == ["X_Y", "Z_Y"]

    def test_create_catalog_service_from_catalog(self, data_dir, catalog):
        service = ServiceFactory(str(data_dir)).create_catalog_service(catalog)

        assert service.catalog is catalog

    def test_load_failure_propagates(self, tmp_path):
        with pytest.raises(CatalogLoadError):
            ServiceFactory(str(tmp_path)).load_catalog()
