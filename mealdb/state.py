"""
Fetch state management for the recipe list and recipe detail views.

Each controller owns a FetchState that the presentation layer reads at any time:

    Idle -> Loading -> Success(value) | Failure(reason)
              ^                             |
              +---------- load() -----------+

Threading model:
- load() runs on the owner thread (the presentation/script thread). It sets
  Loading and submits one fetch to an executor.
- The worker thread never touches the state. When the fetch finishes it posts
  the resulting Success/Failure to the controller's inbox queue.
- poll() runs on the owner thread and applies posted states in completion order.
  load() polls first, so a result that completed before the load is never
  applied on top of its Loading state.

# NOTE: Loads are not de-duplicated or cancelled. Two overlapping load() calls run
    two requests and whichever completes last determines the final state.
"""

import logging
import queue
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from concurrent.futures import wait as wait_futures
from dataclasses import dataclass, field
from functools import partial
from typing import Callable, Generic, List, Optional, TypeVar, Union

from mealdb.config import MealDBConfig
from mealdb.errors import FetchError
from mealdb.models import RecipeDetail, RecipeSummary
from mealdb.service import RecipeService

logger = logging.getLogger(__name__)

T = TypeVar("T")

GENERIC_FAILURE_MESSAGE = FetchError.user_message


@dataclass(frozen=True)
class Idle:
    """Nothing has been requested yet."""


@dataclass(frozen=True)
class Loading:
    """A fetch is in flight."""


@dataclass(frozen=True)
class Success(Generic[T]):
    """The last completed fetch succeeded."""
    value: T


@dataclass(frozen=True)
class Failure:
    """
    The last completed fetch failed.

    Attributes:
        reason: User-displayable message
        error: The exception that caused the failure (not part of equality)
    """
    reason: str
    error: Optional[BaseException] = field(default=None, compare=False, repr=False)


FetchState = Union[Idle, Loading, Success, Failure]

IDLE = Idle()
LOADING = Loading()


class FetchController(Generic[T]):
    """
    Base class holding the fetch lifecycle for one view.

    Subclasses call _start() with a zero-argument callable that performs the fetch.
    load() and poll() must be called from the thread that owns the view state.
    """

    name = "fetch"

    def __init__(self, executor: Optional[Executor] = None) -> None:
        """
        Args:
            executor: Executor used for fetches (optional, a private ThreadPoolExecutor
                      sized by MEALDB_MAX_WORKERS is created if not provided)
        """
        if executor is None:
            self._executor: Executor = ThreadPoolExecutor(
                max_workers=MealDBConfig.get_max_workers(),
                thread_name_prefix=f"mealdb-{self.name}",
            )
            self._owns_executor = True
        else:
            self._executor = executor
            self._owns_executor = False

        self._state: FetchState = IDLE
        self._inbox: "queue.Queue[FetchState]" = queue.Queue()
        self._futures: List[Future] = []

    @property
    def state(self) -> FetchState:
        """Current state as of the last load() or poll()."""
        return self._state

    @property
    def in_flight(self) -> int:
        """Number of submitted fetches that have not completed yet."""
        return sum(1 for future in self._futures if not future.done())

    @property
    def pending(self) -> bool:
        """
        True while the state can still change without another load().

        A published Success/Failure can still be replaced by an overlapping fetch,
        so callers keep polling until nothing is in flight.
        """
        return isinstance(self._state, Loading) or self.in_flight > 0

    def _start(self, fetch: Callable[[], T]) -> None:
        # Results posted before this load happened earlier; apply them first so
        # they cannot land on top of the new Loading state.
        self.poll()
        self._state = LOADING
        logger.debug("%s controller: starting fetch", self.name)
        self._futures.append(self._executor.submit(self._run, fetch))

    def _run(self, fetch: Callable[[], T]) -> None:
        """Worker-side body: perform the fetch and post the outcome."""
        try:
            value = fetch()
        except FetchError as e:
            logger.warning("%s controller: fetch failed: %s", self.name, e)
            self._inbox.put(Failure(e.user_message, e))
        except Exception as e:
            logger.error("%s controller: unexpected error during fetch: %s", self.name, e, exc_info=True)
            self._inbox.put(Failure(GENERIC_FAILURE_MESSAGE, e))
        else:
            self._inbox.put(Success(value))

    def poll(self) -> FetchState:
        """
        Apply every state posted by completed fetches, oldest first.

        Returns:
            The current state after applying pending transitions
        """
        while True:
            try:
                posted = self._inbox.get_nowait()
            except queue.Empty:
                break
            self._state = posted
            logger.debug("%s controller: state -> %s", self.name, type(posted).__name__)

        self._futures = [future for future in self._futures if not future.done()]
        return self._state

    def wait(self, timeout: Optional[float] = None) -> FetchState:
        """
        Block until all in-flight fetches complete (or timeout), then poll.

        Args:
            timeout: Maximum seconds to wait (optional, waits indefinitely if None)

        Returns:
            The current state after applying pending transitions
        """
        if self._futures:
            wait_futures(list(self._futures), timeout=timeout)
        return self.poll()

    def close(self) -> None:
        """Shut down the executor if this controller created it."""
        if self._owns_executor:
            self._executor.shutdown(wait=False)


class ListController(FetchController[List[RecipeSummary]]):
    """Fetch lifecycle for the dessert list."""

    name = "list"

    def __init__(self, service: RecipeService, executor: Optional[Executor] = None) -> None:
        super().__init__(executor)
        self.service = service

    def load(self) -> None:
        """Start fetching the dessert list; always issues a new request."""
        self._start(self.service.list_desserts)


class DetailController(FetchController[RecipeDetail]):
    """Fetch lifecycle for a single recipe's detail."""

    name = "detail"

    def __init__(self, service: RecipeService, recipe_id: str, executor: Optional[Executor] = None) -> None:
        super().__init__(executor)
        self.service = service
        self.recipe_id = recipe_id

    def load(self, recipe_id: Optional[str] = None) -> None:
        """
        Start fetching the recipe detail.

        Args:
            recipe_id: Switch to another recipe before loading (optional, reuses the current id)
        """
        if recipe_id is not None:
            self.recipe_id = recipe_id
        self._start(partial(self.service.get_detail, self.recipe_id))
