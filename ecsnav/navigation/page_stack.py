"""Named page registry with single-visible-page semantics.

The base page is registered at construction, can never be removed, and is
the fallback whenever the visible page goes away. Visibility changes are
reported to an optional presenter callback so the UI layer can push or pop
its own screens.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any

from ecsnav.constants.values import MAIN_PAGE
from ecsnav.exceptions import DuplicateKeyError, PageStackError, UnknownPageError

logger = logging.getLogger(__name__)


@dataclass
class Page:
    """A named, addressable view."""

    key: str
    content: Any = None
    is_modal: bool = False


PagePresenter = Callable[[Page], None]


class PageStack:
    """Ordered registry of pages, exactly one of which is visible."""

    def __init__(
        self,
        base_content: Any = None,
        presenter: PagePresenter | None = None,
        base_key: str = MAIN_PAGE,
    ) -> None:
        self._base_key = base_key
        self._presenter = presenter
        self._pages: dict[str, Page] = {base_key: Page(base_key, base_content)}
        self._visible = base_key

    @property
    def base_key(self) -> str:
        return self._base_key

    @property
    def visible_page(self) -> Page:
        """The page currently shown."""
        return self._pages[self._visible]

    @property
    def visible_key(self) -> str:
        return self._visible

    def keys(self) -> list[str]:
        """Registered page keys in insertion order."""
        return list(self._pages)

    def has_page(self, key: str) -> bool:
        return key in self._pages

    def __contains__(self, key: object) -> bool:
        return key in self._pages

    def __len__(self) -> int:
        return len(self._pages)

    def __iter__(self) -> Iterator[Page]:
        return iter(list(self._pages.values()))

    def add_page(
        self,
        key: str,
        content: Any,
        modal: bool = False,
        visible: bool = False,
        replace: bool = False,
    ) -> Page:
        """Register a page, optionally making it the visible one.

        Args:
            key: Unique page key.
            content: Opaque view handle.
            modal: Whether the page overlays the page beneath it.
            visible: Switch to the page after registering it.
            replace: Drop an existing page with the same key instead of failing.

        Raises:
            DuplicateKeyError: ``key`` exists and ``replace`` is False.
        """
        if key in self._pages:
            if not replace:
                raise DuplicateKeyError(key)
            self.remove_page(key)

        page = Page(key, content, modal)
        self._pages[key] = page
        logger.debug(f"Added page {key!r} (modal={modal}, visible={visible})")
        if visible:
            self.switch_to(key)
        return page

    def switch_to(self, key: str) -> Page:
        """Make ``key`` the sole visible page.

        Raises:
            UnknownPageError: No page is registered under ``key``.
        """
        page = self._pages.get(key)
        if page is None:
            raise UnknownPageError(key)
        self._visible = key
        if self._presenter is not None:
            self._presenter(page)
        return page

    def remove_page(self, key: str, fallback: str | None = None) -> None:
        """Remove a page.

        If the removed page was visible, ``fallback`` (default: the base page)
        becomes visible.

        Raises:
            PageStackError: ``key`` is the base page.
            UnknownPageError: ``key`` or ``fallback`` is not registered.
        """
        if key == self._base_key:
            raise PageStackError("The base page cannot be removed")
        if key not in self._pages:
            raise UnknownPageError(key)

        target = fallback or self._base_key
        if target == key or target not in self._pages:
            raise UnknownPageError(target)

        was_visible = self._visible == key
        del self._pages[key]
        logger.debug(f"Removed page {key!r}")
        if was_visible:
            self.switch_to(target)
