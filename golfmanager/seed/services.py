"""Service that loads demo data into an empty data store."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor, wait
from typing import TYPE_CHECKING, Any

from golfmanager.core.constants import SEED_MAX_WORKERS
from golfmanager.errors import SeedError
from golfmanager.gateway.models import TournamentStatus
from golfmanager.utils import days_from_now_ns, new_id

from .demo_data import (
    CHAMPIONSHIP,
    CHAMPIONSHIP_SCORES,
    DEMO_PLAYERS,
    DEMO_TOURNAMENTS,
    SPRING_OPEN,
    SPRING_OPEN_SCORES,
)

if TYPE_CHECKING:
    from golfmanager.data import GolfStore

logger = logging.getLogger(__name__)


class DemoSeeder:
    """Loads the demo players, tournaments and scores.

    Seeding happens only when the caller has observed an empty tournament
    collection. While one attempt is running, further attempts return
    immediately. A failed attempt releases the marker so a later request can
    try again; writes that already landed are not rolled back.
    """

    def __init__(self, store: GolfStore, max_workers: int = SEED_MAX_WORKERS) -> None:
        self.store = store
        self.max_workers = max_workers
        self._in_flight = threading.Lock()

    @property
    def in_flight(self) -> bool:
        return self._in_flight.locked()

    def seed_if_empty(self, existing_tournaments: Sequence[Any]) -> bool:
        """Seed when ``existing_tournaments`` is empty.

        Returns True if this call loaded the demo data.

        Raises:
            SeedError: If any write of the attempt failed.
        """
        if existing_tournaments:
            return False
        if not self._in_flight.acquire(blocking=False):
            logger.info("Demo seeding already in progress; skipping.")
            return False
        try:
            self._seed()
        except Exception as e:
            logger.error(f"Demo seeding aborted: {e}")
            raise SeedError(f"Demo data could not be loaded: {e}") from e
        finally:
            self._in_flight.release()
            self.store.invalidate_all()
        logger.info("Demo data loaded.")
        return True

    def _fan_out(self, calls: Iterable[Callable[[], Any]]) -> None:
        """Issue every call concurrently and wait for all of them."""
        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            futures = [executor.submit(call) for call in calls]
            wait(futures)
        for future in futures:
            # Re-raise the first failure once every call has finished
            future.result()

    def _seed(self) -> None:
        gateway = self.store.gateway

        player_ids = {name: new_id() for name, _ in DEMO_PLAYERS}
        self._fan_out(
            lambda name=name, handicap=handicap: gateway.create_player(
                player_ids[name], name, handicap
            )
            for name, handicap in DEMO_PLAYERS
        )

        tournament_ids = {t["name"]: new_id() for t in DEMO_TOURNAMENTS}
        self._fan_out(
            lambda t=t: gateway.create_tournament(
                tournament_ids[t["name"]],
                t["name"],
                days_from_now_ns(t["days_from_now"]),
                t["format"],
                t["location"],
            )
            for t in DEMO_TOURNAMENTS
        )

        # New tournaments start upcoming
        self._fan_out(
            lambda t=t: gateway.update_tournament(
                tournament_ids[t["name"]], status=t["status"]
            )
            for t in DEMO_TOURNAMENTS
            if t["status"] != TournamentStatus.UPCOMING
        )

        self._seed_field(
            tournament_ids[CHAMPIONSHIP["name"]],
            [player_ids[name] for name, _ in DEMO_PLAYERS],
            CHAMPIONSHIP_SCORES,
            player_ids,
        )
        self._seed_field(
            tournament_ids[SPRING_OPEN["name"]],
            [player_ids[name] for name in SPRING_OPEN_SCORES],
            SPRING_OPEN_SCORES,
            player_ids,
        )

    def _seed_field(
        self,
        tournament_id: str,
        roster: list[str],
        scores: dict[str, tuple[int, ...]],
        player_ids: dict[str, str],
    ) -> None:
        gateway = self.store.gateway
        self._fan_out(
            lambda pid=pid: gateway.register_player_to_tournament(tournament_id, pid)
            for pid in roster
        )
        self._fan_out(
            lambda pid=player_ids[name], hole=hole, strokes=strokes: (
                gateway.record_score(new_id(), tournament_id, pid, hole, strokes)
            )
            for name, card in scores.items()
            for hole, strokes in enumerate(card, start=1)
        )
