"""Explorer: session orchestrator between the presentation layer and the core.

The presentation layer renders an ``ExplorerState`` and sends intents back
as discrete method calls (toggle-expand, toggle-select, select-subtree,
rename, compare, request code, search).  Each call computes a new frozen
``ExplorerState`` and swaps it in wholesale, so a renderer holding the
previous snapshot never sees a partially applied transition.

Architecture:
- Expensive work (parsing, planning, diffing) runs outside the state lock;
  only the final swap is locked.
- ``submit_load`` runs ``load`` on a single background worker.  There is no
  cancellation: an older load still runs to completion, and whichever load
  finishes last is the state that remains (latest request wins).
- A failed parse leaves the document and all derived state untouched and
  reports an error ``Message`` instead.
- Persistence is optional.  With a ``Storage`` the last input text, column
  name and bookmarks are saved; a failing store only produces an error
  ``Message``.
"""

from __future__ import annotations

import json
import logging
import threading
from collections.abc import Callable, Iterable
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any

from json_field_picker.algorithm.config import ExplorerConfig, SizeClass
from json_field_picker.algorithm.differ import StructuralDiffer
from json_field_picker.cache import CodeCache, PatternCache
from json_field_picker.codegen import TargetLanguage
from json_field_picker.exceptions import ParseError
from json_field_picker.paths import (
    ROOT_PATH_KEY,
    Path,
    json_fragment,
    normalize_path,
    path_to_dot_notation,
    path_to_python_accessor,
    resolve_path,
)
from json_field_picker.result import DiffResult, DocumentStats, ExpansionPlan, Message
from json_field_picker.search import SearchMatch, search
from json_field_picker.selection import SelectionRegistry, SubtreeSelection
from json_field_picker.traversal import build_expanded_set_all, compute_stats, plan_expansion
from json_field_picker.tree.builder import parse_json
from json_field_picker.tree.nodes import JsonValue

if TYPE_CHECKING:
    from json_field_picker.protocols import Storage

__all__ = ["Bookmark", "Explorer", "ExplorerState"]

_LOG = logging.getLogger(__name__)

DEFAULT_COLUMN_NAME = "data"
DEFAULT_SUCCESS_MESSAGE = "JSON parsed successfully!"

STORAGE_LAST_INPUT = "json_field_picker.last_input"
STORAGE_COLUMN_NAME = "json_field_picker.column_name"
STORAGE_BOOKMARKS = "json_field_picker.bookmarks"


@dataclass(frozen=True, slots=True)
class Bookmark:
    path: Path
    label: str


@dataclass(frozen=True, slots=True)
class ExplorerState:
    """Immutable snapshot of everything the renderer needs.

    Attributes:
        text: Raw text of the loaded document.
        document: The parsed value (meaningful only when ``loaded``).
        loaded: Whether a document has been parsed successfully.
        plan: Expansion plan chosen for the current document.
        expanded: Path keys of open containers; never empty.
        max_children_to_show: Children rendered per container.
        registry: Current selections.
        diff: Result of the latest comparison, if any.
        column_name: Source column the generated code reads from.
        bookmarks: Saved paths, in insertion order.
        message: Latest user-visible status, if any.
    """

    text: str = ""
    document: JsonValue = None
    loaded: bool = False
    plan: ExpansionPlan | None = None
    expanded: frozenset[str] = frozenset({ROOT_PATH_KEY})
    max_children_to_show: int = 200
    registry: SelectionRegistry = field(default_factory=SelectionRegistry)
    diff: DiffResult | None = None
    column_name: str = DEFAULT_COLUMN_NAME
    bookmarks: tuple[Bookmark, ...] = ()
    message: Message | None = None


def _plural(count: int, noun: str) -> str:
    return f"{count} {noun}{'' if count == 1 else 's'}"


def _load_message(plan: ExpansionPlan, base: str) -> Message:
    if plan.size_class == SizeClass.VERY_LARGE:
        return Message.success(
            f"{base} Very large payload detected ({plan.estimated_nodes}+ nodes); "
            "tree left collapsed for performance."
        )
    if plan.size_class == SizeClass.LARGE:
        return Message.success(
            f"{base} Large payload detected ({plan.estimated_nodes}+ nodes); "
            "showing collapsed view. Expand nodes to explore."
        )
    return Message.success(f"{base} Tree stays collapsed; expand nodes to drill down.")


class Explorer:
    """Stateful facade over the core for one interactive session.

    Example::

        explorer = Explorer()
        explorer.load('{"items": [{"v": 1}, {"v": 2}]}')
        explorer.toggle_select(["items", 0, "v"])
        print(explorer.generate_code("python"))

    Args:
        config: Size thresholds and cache sizes.  Defaults to ``ExplorerConfig()``.
        storage: Optional persistence collaborator.
        column_name: Initial source column name (a stored one takes precedence).
    """

    def __init__(
        self,
        config: ExplorerConfig | None = None,
        storage: Storage | None = None,
        column_name: str = DEFAULT_COLUMN_NAME,
    ) -> None:
        self._config: ExplorerConfig = config if config is not None else ExplorerConfig()
        self._storage = storage
        self._lock = threading.Lock()
        self._executor: ThreadPoolExecutor | None = None
        self._differ = StructuralDiffer()
        self._code_cache = CodeCache(max_size=self._config.code_cache_size)
        self._patterns = PatternCache()
        self._state = ExplorerState(
            column_name=column_name,
            max_children_to_show=self._config.normal_max_children,
        )
        if storage is not None:
            self._restore_preferences()

    # ------------------------------------------------------------------
    # Snapshot plumbing
    # ------------------------------------------------------------------

    @property
    def state(self) -> ExplorerState:
        return self._state

    @property
    def config(self) -> ExplorerConfig:
        return self._config

    def _commit(self, transition: Callable[[ExplorerState], ExplorerState]) -> ExplorerState:
        with self._lock:
            self._state = transition(self._state)
            return self._state

    def _notify(self, message: Message) -> Message:
        self._commit(lambda s: replace(s, message=message))
        return message

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load(self, text: str | bytes, success_message: str | None = None) -> Message:
        """Parse ``text`` and replace the document and all derived state.

        On failure nothing but the status message changes.
        """
        if isinstance(text, bytes):
            raw = text
            shown = text.decode("utf-8-sig", errors="replace")
        else:
            raw = shown = text
        if not shown.strip():
            return self._notify(Message.error("Please enter JSON data."))

        try:
            document = parse_json(raw)
        except ParseError as exc:
            _LOG.debug("rejected input: %s", exc)
            return self._notify(Message.error(f"Invalid JSON: {exc}"))

        plan = plan_expansion(document, self._config)
        message = _load_message(plan, success_message or DEFAULT_SUCCESS_MESSAGE)
        _LOG.debug(
            "loaded document: size_class=%s estimated_nodes=%d",
            plan.size_class,
            plan.estimated_nodes,
        )

        self._commit(
            lambda s: replace(
                s,
                text=shown,
                document=document,
                loaded=True,
                plan=plan,
                expanded=plan.expanded,
                max_children_to_show=plan.max_children_to_show,
                registry=SelectionRegistry(),
                diff=None,
                message=message,
            )
        )
        self._persist(STORAGE_LAST_INPUT, shown, "input")
        return message

    def submit_load(self, text: str | bytes, success_message: str | None = None) -> Future[Message]:
        """Run ``load`` on the background worker; the last load to finish wins."""
        with self._lock:
            if self._executor is None:
                self._executor = ThreadPoolExecutor(
                    max_workers=1, thread_name_prefix="json-field-picker"
                )
            return self._executor.submit(self.load, text, success_message)

    def restore_last_input(self) -> Message | None:
        """Reload the input text saved by a previous session, if any."""
        saved = self._read(STORAGE_LAST_INPUT)
        if not saved:
            return None
        return self.load(saved, "Restored previous input.")

    def close(self) -> None:
        with self._lock:
            executor, self._executor = self._executor, None
        if executor is not None:
            executor.shutdown(wait=True)

    def __enter__(self) -> Explorer:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Expansion
    # ------------------------------------------------------------------

    def toggle_expand(self, path_key: str) -> frozenset[str]:
        def transition(s: ExplorerState) -> ExplorerState:
            return replace(s, expanded=s.expanded ^ {path_key})

        return self._commit(transition).expanded

    def expand_all(self) -> frozenset[str]:
        if not self._state.loaded:
            return self._state.expanded
        expanded = build_expanded_set_all(self._state.document)
        self._commit(
            lambda s: replace(
                s, expanded=expanded, message=Message.success("All nodes expanded.")
            )
        )
        return expanded

    def collapse_all(self) -> frozenset[str]:
        expanded = frozenset({ROOT_PATH_KEY})
        self._commit(
            lambda s: replace(
                s, expanded=expanded, message=Message.success("All nodes collapsed.")
            )
        )
        return expanded

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    def toggle_select(self, path: Iterable[Any]) -> SelectionRegistry:
        path = tuple(path)
        return self._commit(lambda s: replace(s, registry=s.registry.toggle(path))).registry

    def select_subtree(
        self, path: Iterable[Any], value: JsonValue | None = None
    ) -> SubtreeSelection:
        """Bulk-select (or bulk-deselect) every leaf under a node.

        When ``value`` is omitted it is looked up in the current document.
        """
        path = tuple(path)
        if value is None:
            found, value = resolve_path(self._state.document, normalize_path(path))
            if not found or not self._state.loaded:
                self._notify(Message.error("No fields found under this node."))
                return SubtreeSelection(registry=self._state.registry)

        with self._lock:
            outcome = self._state.registry.select_subtree(path, value)
            if outcome.added:
                message = Message.success(
                    f"Added {_plural(outcome.added, 'field')} from the selected node."
                )
            elif outcome.removed:
                message = Message.success(
                    f"Removed {_plural(outcome.removed, 'field')} from the selected node."
                )
            else:
                message = Message.error("No fields found under this node.")
            self._state = replace(self._state, registry=outcome.registry, message=message)
        return outcome

    def rename(self, key: str, field_name: str) -> SelectionRegistry:
        return self._commit(
            lambda s: replace(s, registry=s.registry.rename(key, field_name))
        ).registry

    def clear_selections(self) -> SelectionRegistry:
        return self._commit(
            lambda s: replace(
                s,
                registry=s.registry.clear(),
                message=Message.success("All selections removed."),
            )
        ).registry

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def compare(self, other: JsonValue) -> DiffResult | None:
        """Diff the current document against ``other`` and keep the result.

        Returns None (plus an error message) when no document is loaded.
        """
        state = self._state
        if not state.loaded:
            self._notify(Message.error("Load a JSON document before comparing."))
            return None
        result = self._differ.compare(state.document, other)
        if result.is_identical:
            message = Message.success("Documents are identical.")
        else:
            message = Message.success(
                f"{_plural(len(result), 'difference')} found: {result.added} added, "
                f"{result.removed} removed, {result.modified} modified."
            )
        self._commit(lambda s: replace(s, diff=result, message=message))
        return result

    def compare_text(self, text: str | bytes) -> DiffResult | None:
        """Parse ``text`` and diff against it; None (plus a message) if it is invalid."""
        try:
            other = parse_json(text)
        except ParseError as exc:
            self._notify(Message.error(f"Invalid comparison JSON: {exc}"))
            return None
        return self.compare(other)

    def clear_diff(self) -> None:
        self._commit(lambda s: replace(s, diff=None))

    # ------------------------------------------------------------------
    # Derived views
    # ------------------------------------------------------------------

    def generate_code(self, target: TargetLanguage | str = TargetLanguage.PYTHON) -> str:
        state = self._state
        return self._code_cache.generate(
            target, state.registry.selections(), state.column_name
        )

    def search(self, query: str, regex: bool = False) -> list[SearchMatch]:
        state = self._state
        if not state.loaded:
            return []
        return search(state.document, query, regex=regex, patterns=self._patterns)

    def stats(self) -> DocumentStats | None:
        state = self._state
        if not state.loaded:
            return None
        return compute_stats(state.document)

    def set_column_name(self, column_name: str) -> None:
        self._commit(lambda s: replace(s, column_name=column_name))
        self._persist(STORAGE_COLUMN_NAME, column_name, "column name")

    # ------------------------------------------------------------------
    # Bookmarks
    # ------------------------------------------------------------------

    def add_bookmark(self, path: Iterable[Any], label: str | None = None) -> tuple[Bookmark, ...]:
        normalized = normalize_path(path)
        bookmark = Bookmark(
            path=normalized,
            label=label or path_to_dot_notation(normalized) or "(root)",
        )

        def transition(s: ExplorerState) -> ExplorerState:
            if any(existing.path == normalized for existing in s.bookmarks):
                return s
            return replace(s, bookmarks=(*s.bookmarks, bookmark))

        bookmarks = self._commit(transition).bookmarks
        self._persist_bookmarks(bookmarks)
        return bookmarks

    def remove_bookmark(self, path: Iterable[Any]) -> tuple[Bookmark, ...]:
        normalized = normalize_path(path)
        bookmarks = self._commit(
            lambda s: replace(
                s, bookmarks=tuple(b for b in s.bookmarks if b.path != normalized)
            )
        ).bookmarks
        self._persist_bookmarks(bookmarks)
        return bookmarks

    # ------------------------------------------------------------------
    # Clipboard / export text
    # ------------------------------------------------------------------

    def copy_path_text(self, path: Iterable[Any]) -> str | None:
        """Dot-notation text for a path; None (plus a message) for the root."""
        path = tuple(path)
        if not path:
            self._notify(Message.error("No path to copy."))
            return None
        return path_to_dot_notation(path)

    def copy_python_path_text(self, path: Iterable[Any]) -> str | None:
        path = tuple(path)
        if not path:
            self._notify(Message.error("No path to convert."))
            return None
        return path_to_python_accessor(path)

    def copy_json_text(self, value: JsonValue) -> str:
        return json_fragment(value)

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def _read(self, key: str) -> str | None:
        if self._storage is None:
            return None
        try:
            return self._storage.load(key)
        except Exception as exc:
            _LOG.warning("storage read failed for %s", key, exc_info=exc)
            self._notify(Message.error(f"Unable to read saved data: {exc}"))
            return None

    def _persist(self, key: str, value: str, what: str) -> None:
        if self._storage is None:
            return
        try:
            self._storage.save(key, value)
        except Exception as exc:
            _LOG.warning("storage write failed for %s", key, exc_info=exc)
            self._notify(Message.error(f"Unable to save {what}: {exc}"))

    def _persist_bookmarks(self, bookmarks: tuple[Bookmark, ...]) -> None:
        payload = json.dumps(
            [{"path": list(b.path), "label": b.label} for b in bookmarks],
            ensure_ascii=False,
        )
        self._persist(STORAGE_BOOKMARKS, payload, "bookmarks")

    def _restore_preferences(self) -> None:
        column_name = self._read(STORAGE_COLUMN_NAME)
        raw_bookmarks = self._read(STORAGE_BOOKMARKS)

        bookmarks: tuple[Bookmark, ...] = ()
        if raw_bookmarks:
            try:
                bookmarks = tuple(
                    Bookmark(path=normalize_path(item["path"]), label=str(item["label"]))
                    for item in json.loads(raw_bookmarks)
                )
            except (ValueError, TypeError, KeyError) as exc:
                _LOG.warning("ignoring malformed saved bookmarks", exc_info=exc)
                self._notify(Message.error("Saved bookmarks were unreadable and were reset."))

        self._commit(
            lambda s: replace(
                s,
                column_name=column_name if column_name is not None else s.column_name,
                bookmarks=bookmarks,
            )
        )
