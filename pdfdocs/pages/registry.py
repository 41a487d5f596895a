"""
Page Type Registry

Maps page keys such as 'invoice.items' to Page classes, so documents can add
pages by key. Apps register their page types from a ``pdf_pages`` module.
"""

from typing import Type


class PageRegistry:
    """Page classes by key"""
    
    def __init__(self):
        self._pages: dict[str, Type] = {}
    
    def __contains__(self, page_key: str) -> bool:
        return page_key in self._pages
    
    def register(self, page_key: str, page_class: Type) -> None:
        """
        Register a page class under a key.
        
        Raises:
            ValueError: If the key is already taken
        """
        if page_key in self._pages:
            raise ValueError(f"Page type '{page_key}' is already registered")
        self._pages[page_key] = page_class
    
    def get_page_class(self, page_key: str) -> Type:
        """
        Raises:
            KeyError: If no page class is registered under the key
        """
        try:
            return self._pages[page_key]
        except KeyError:
            raise KeyError(f"Page type '{page_key}' not found") from None


page_registry = PageRegistry()


def register_page(page_key: str, page_class: Type) -> None:
    page_registry.register(page_key, page_class)


def get_page_class(page_key: str) -> Type:
    return page_registry.get_page_class(page_key)
