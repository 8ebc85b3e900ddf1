"""
Tests for pagination utilities.

Tests cover:
- Pagination metadata calculation
- Paginated response creation
- Translation between pages, the limit field and the find window
"""

import pytest
from datetime import datetime

from core.pagination import (
    calculate_pagination_meta,
    create_paginated_response,
    calculate_skip,
    page_to_limit,
    split_limit,
    pagination_window,
)


class TestPaginationMetaCalculation:
    """Tests for pagination metadata calculation."""

    def test_calculate_pagination_meta_primera_pagina(self):
        """Test pagination metadata for first page."""
        meta = calculate_pagination_meta(page=0, page_size=10, total_items=50)

        assert meta.total_pages == 5
        assert meta.has_next is True
        assert meta.has_previous is False

    def test_calculate_pagination_meta_ultima_pagina(self):
        """Test pagination metadata for last page."""
        meta = calculate_pagination_meta(page=4, page_size=10, total_items=50)

        assert meta.has_next is False
        assert meta.has_previous is True

    def test_calculate_pagination_meta_items_parciales(self):
        """Test pagination with partial last page."""
        meta = calculate_pagination_meta(page=0, page_size=10, total_items=25)

        # 25 items with page_size 10 = 3 pages (10, 10, 5)
        assert meta.total_pages == 3

    def test_calculate_pagination_meta_sin_items(self):
        """Test pagination with no items."""
        meta = calculate_pagination_meta(page=0, page_size=10, total_items=0)

        assert meta.total_pages == 0
        assert meta.has_next is False
        assert meta.has_previous is False


class TestPaginatedResponseCreation:
    """Tests for creating paginated responses."""

    def test_create_paginated_response_estructura(self):
        """Test paginated response has correct structure."""
        items = [{"id": 1}, {"id": 2}, {"id": 3}]

        response = create_paginated_response(items=items, page=0, page_size=10, total_items=50)

        assert response["success"] is True
        assert response["data"] == items
        assert response["pagination"]["total_items"] == 50
        assert isinstance(response["timestamp"], datetime)

    def test_create_paginated_response_lista_vacia(self):
        """Test paginated response with empty list."""
        response = create_paginated_response(items=[], page=0, page_size=10, total_items=0)

        assert response["data"] == []
        assert response["pagination"]["total_pages"] == 0


class TestSkipCalculation:
    """Tests for skip/offset calculation."""

    def test_calculate_skip_primera_pagina(self):
        assert calculate_skip(page=0, page_size=10) == 0

    def test_calculate_skip_diferentes_page_sizes(self):
        assert calculate_skip(page=2, page_size=25) == 50
        assert calculate_skip(page=5, page_size=100) == 500

    def test_page_to_limit(self):
        """Test page/page_size becomes the [skip, take] pair."""
        assert page_to_limit(0, 10) == [0, 10]
        assert page_to_limit(3, 20) == [60, 20]


class TestSplitLimit:
    """Tests for extracting the limit field from filters."""

    def test_split_limit_separa_paginacion(self):
        """Test limit is removed and converted to skip/take."""
        filters, pagination = split_limit({"limit": [0, 10], "edificio": "A"})

        assert filters == {"edificio": "A"}
        assert pagination == {"skip": 0, "take": 10}

    def test_split_limit_no_modifica_original(self):
        """Test the caller's mapping is left untouched."""
        original = {"limit": [5, 5], "disponible": True}

        split_limit(original)

        assert original == {"limit": [5, 5], "disponible": True}

    def test_split_limit_sin_limit(self):
        """Test missing limit is a caller error."""
        with pytest.raises(KeyError):
            split_limit({"edificio": "A"})

    def test_split_limit_solo_limit(self):
        """Test only limit yields empty filters."""
        filters, pagination = split_limit({"limit": [20, 5]})

        assert filters == {}
        assert pagination == {"skip": 20, "take": 5}


class TestPaginationWindow:
    """Tests for reading skip/take from a pagination mapping."""

    def test_pagination_window_vacio(self):
        assert pagination_window({}) == (None, None)
        assert pagination_window(None) == (None, None)

    def test_pagination_window_completo(self):
        assert pagination_window({"skip": 10, "take": 5}) == (10, 5)
