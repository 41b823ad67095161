"""Firestore-backed gateway for players, tournaments, registrations and scores."""

from __future__ import annotations

import functools
import logging
from typing import TYPE_CHECKING, Any, Callable, TypeVar, cast

from firebase_admin import firestore
from google.api_core import exceptions as google_exceptions

from golfmanager.core.constants import (
    FIRESTORE_BATCH_LIMIT,
    PLAYERS_COLLECTION,
    REGISTRATIONS_COLLECTION,
    SCORES_COLLECTION,
    TOURNAMENTS_COLLECTION,
)
from golfmanager.errors import GatewayError, NotFoundError, ValidationError
from golfmanager.utils import now_ns

from .models import (
    LeaderboardEntry,
    Player,
    Registration,
    Score,
    Tournament,
    TournamentFormat,
    TournamentStatus,
)

if TYPE_CHECKING:
    from google.cloud.firestore_v1.client import Client
    from google.cloud.firestore_v1.document import DocumentReference

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def _gateway_call(func: F) -> F:
    """Surface Firestore API failures as ``GatewayError``."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except google_exceptions.GoogleAPICallError as e:
            logger.error(f"Gateway call {func.__name__} failed: {e}")
            raise GatewayError(f"{func.__name__} failed: {e}") from e

    return cast(F, wrapper)


def registration_id(tournament_id: str, player_id: str) -> str:
    """Document id of a registration. One per (tournament, player) pair."""
    return f"{tournament_id}_{player_id}"


def score_slot_id(tournament_id: str, player_id: str, hole: int) -> str:
    """Document id of a score. One per (tournament, player, hole)."""
    return f"{tournament_id}_{player_id}_{hole}"


E = TypeVar("E", TournamentFormat, TournamentStatus)


def _coerce(enum_cls: type[E], value: Any) -> E:
    try:
        return enum_cls(value)
    except ValueError:
        raise ValidationError(f"Invalid {enum_cls.__name__}: {value!r}") from None


class FirestoreGateway:
    """Typed operations over the Firestore collections.

    Identifiers of new players, tournaments and scores are supplied by the
    caller. Every operation either returns or raises: ``NotFoundError`` for a
    missing document, ``GatewayError`` when Firestore rejects the call.
    """

    def __init__(self, db: Client | None = None) -> None:
        self._db = db

    @property
    def db(self) -> Client:
        if self._db is None:
            return firestore.client()
        return self._db

    # Helpers ----------------------------------------------------------------

    def _doc(self, collection: str, doc_id: str) -> DocumentReference:
        return self.db.collection(collection).document(doc_id)

    def _require(self, collection: str, doc_id: str, label: str) -> dict[str, Any]:
        snapshot = cast(Any, self._doc(collection, doc_id).get())
        data = snapshot.to_dict() if snapshot.exists else None
        if data is None:
            raise NotFoundError(f"{label} not found.")
        data["id"] = snapshot.id
        return data

    def _stream_where(self, collection: str, field: str, value: Any) -> Any:
        return (
            self.db.collection(collection)
            .where(filter=firestore.FieldFilter(field, "==", value))
            .stream()
        )

    def _fetch_many(
        self, collection: str, doc_ids: list[str]
    ) -> dict[str, dict[str, Any]]:
        """Fetch documents by id in one round-trip, skipping missing ones."""
        if not doc_ids:
            return {}
        refs = [self._doc(collection, doc_id) for doc_id in doc_ids]
        found = {}
        for snapshot in self.db.get_all(refs):
            if snapshot.exists:
                data = snapshot.to_dict() or {}
                data["id"] = snapshot.id
                found[snapshot.id] = data
        return found

    def _delete_refs(self, refs: list[DocumentReference]) -> None:
        """Delete documents in batches below the Firestore write limit."""
        batch = self.db.batch()
        operation_count = 0
        for ref in refs:
            batch.delete(ref)
            operation_count += 1
            if operation_count >= FIRESTORE_BATCH_LIMIT:
                batch.commit()
                batch = self.db.batch()
                operation_count = 0
        if operation_count > 0:
            batch.commit()

    def _registrations(self, field: str, value: str) -> list[Registration]:
        registrations = [
            cast(Registration, doc.to_dict() or {})
            for doc in self._stream_where(REGISTRATIONS_COLLECTION, field, value)
        ]
        registrations.sort(key=lambda r: r.get("createdAt") or 0)
        return registrations

    # Players ----------------------------------------------------------------

    @_gateway_call
    def create_player(self, player_id: str, name: str, handicap: int) -> None:
        """Create a player document."""
        self._doc(PLAYERS_COLLECTION, player_id).set(
            {"name": name, "handicap": int(handicap), "createdAt": now_ns()}
        )

    @_gateway_call
    def update_player(
        self, player_id: str, name: str | None = None, handicap: int | None = None
    ) -> None:
        """Update the given fields of a player. ``None`` leaves a field as is."""
        self._require(PLAYERS_COLLECTION, player_id, "Player")
        update_data: dict[str, Any] = {}
        if name is not None:
            update_data["name"] = name
        if handicap is not None:
            update_data["handicap"] = int(handicap)
        if update_data:
            update_data["updatedAt"] = now_ns()
            self._doc(PLAYERS_COLLECTION, player_id).update(update_data)

    @_gateway_call
    def delete_player(self, player_id: str) -> None:
        """Delete a player together with their registrations and scores."""
        refs = [
            self._doc(
                REGISTRATIONS_COLLECTION,
                registration_id(r["tournamentId"], player_id),
            )
            for r in self._registrations("playerId", player_id)
        ]
        refs.extend(
            doc.reference
            for doc in self._stream_where(SCORES_COLLECTION, "playerId", player_id)
        )
        refs.append(self._doc(PLAYERS_COLLECTION, player_id))
        self._delete_refs(refs)

    @_gateway_call
    def get_all_players(self) -> list[Player]:
        """Fetch every player."""
        players = []
        for doc in self.db.collection(PLAYERS_COLLECTION).stream():
            data = doc.to_dict()
            if data:
                data["id"] = doc.id
                players.append(cast(Player, data))
        return players

    @_gateway_call
    def get_player(self, player_id: str) -> Player:
        """Fetch a single player."""
        return cast(Player, self._require(PLAYERS_COLLECTION, player_id, "Player"))

    # Tournaments ------------------------------------------------------------

    @_gateway_call
    def create_tournament(  # noqa: PLR0913
        self,
        tournament_id: str,
        name: str,
        date: int,
        format: TournamentFormat | str,
        location: str,
    ) -> None:
        """Create a tournament. New tournaments are always upcoming."""
        self._doc(TOURNAMENTS_COLLECTION, tournament_id).set(
            {
                "name": name,
                "date": int(date),
                "format": _coerce(TournamentFormat, format).value,
                "status": TournamentStatus.UPCOMING.value,
                "location": location,
                "createdAt": now_ns(),
            }
        )

    @_gateway_call
    def update_tournament(  # noqa: PLR0913
        self,
        tournament_id: str,
        name: str | None = None,
        date: int | None = None,
        format: TournamentFormat | str | None = None,
        status: TournamentStatus | str | None = None,
        location: str | None = None,
    ) -> None:
        """Update the given fields of a tournament. ``None`` leaves a field as is."""
        self._require(TOURNAMENTS_COLLECTION, tournament_id, "Tournament")
        update_data: dict[str, Any] = {}
        if name is not None:
            update_data["name"] = name
        if date is not None:
            update_data["date"] = int(date)
        if format is not None:
            update_data["format"] = _coerce(TournamentFormat, format).value
        if status is not None:
            update_data["status"] = _coerce(TournamentStatus, status).value
        if location is not None:
            update_data["location"] = location
        if update_data:
            update_data["updatedAt"] = now_ns()
            self._doc(TOURNAMENTS_COLLECTION, tournament_id).update(update_data)

    @_gateway_call
    def delete_tournament(self, tournament_id: str) -> None:
        """Delete a tournament together with its registrations and scores."""
        refs = [
            self._doc(
                REGISTRATIONS_COLLECTION,
                registration_id(tournament_id, r["playerId"]),
            )
            for r in self._registrations("tournamentId", tournament_id)
        ]
        refs.extend(
            doc.reference
            for doc in self._stream_where(
                SCORES_COLLECTION, "tournamentId", tournament_id
            )
        )
        refs.append(self._doc(TOURNAMENTS_COLLECTION, tournament_id))
        self._delete_refs(refs)

    @_gateway_call
    def get_all_tournaments(self) -> list[Tournament]:
        """Fetch every tournament."""
        tournaments = []
        for doc in self.db.collection(TOURNAMENTS_COLLECTION).stream():
            data = doc.to_dict()
            if data:
                data["id"] = doc.id
                tournaments.append(cast(Tournament, data))
        return tournaments

    @_gateway_call
    def get_tournament(self, tournament_id: str) -> Tournament:
        """Fetch a single tournament."""
        return cast(
            Tournament,
            self._require(TOURNAMENTS_COLLECTION, tournament_id, "Tournament"),
        )

    # Registrations ----------------------------------------------------------

    @_gateway_call
    def register_player_to_tournament(self, tournament_id: str, player_id: str) -> None:
        """Register a player. Registering twice keeps a single registration."""
        self._require(TOURNAMENTS_COLLECTION, tournament_id, "Tournament")
        self._require(PLAYERS_COLLECTION, player_id, "Player")
        ref = self._doc(REGISTRATIONS_COLLECTION, registration_id(tournament_id, player_id))
        if cast(Any, ref.get()).exists:
            return
        ref.set(
            {"tournamentId": tournament_id, "playerId": player_id, "createdAt": now_ns()}
        )

    @_gateway_call
    def remove_player_from_tournament(self, tournament_id: str, player_id: str) -> None:
        """Remove a registration. Recorded scores are kept."""
        self._doc(
            REGISTRATIONS_COLLECTION, registration_id(tournament_id, player_id)
        ).delete()

    @_gateway_call
    def get_players_for_tournament(self, tournament_id: str) -> list[Player]:
        """Fetch the roster of a tournament in registration order."""
        player_ids = [
            r["playerId"] for r in self._registrations("tournamentId", tournament_id)
        ]
        players_map = self._fetch_many(PLAYERS_COLLECTION, player_ids)
        return [
            cast(Player, players_map[pid]) for pid in player_ids if pid in players_map
        ]

    @_gateway_call
    def get_tournaments_for_player(self, player_id: str) -> list[Tournament]:
        """Fetch the tournaments a player is registered to."""
        tournament_ids = [
            r["tournamentId"] for r in self._registrations("playerId", player_id)
        ]
        tournaments_map = self._fetch_many(TOURNAMENTS_COLLECTION, tournament_ids)
        return [
            cast(Tournament, tournaments_map[tid])
            for tid in tournament_ids
            if tid in tournaments_map
        ]

    # Scores -----------------------------------------------------------------

    @_gateway_call
    def record_score(  # noqa: PLR0913
        self,
        score_id: str,
        tournament_id: str,
        player_id: str,
        hole: int,
        strokes: int,
    ) -> None:
        """Record strokes for a hole, overwriting any earlier score for it."""
        self._doc(
            SCORES_COLLECTION, score_slot_id(tournament_id, player_id, int(hole))
        ).set(
            {
                "id": score_id,
                "tournamentId": tournament_id,
                "playerId": player_id,
                "hole": int(hole),
                "strokes": int(strokes),
                "createdAt": now_ns(),
            }
        )

    @_gateway_call
    def get_scores_for_player(self, tournament_id: str, player_id: str) -> list[Score]:
        """Fetch a player's recorded scores for a tournament, ordered by hole."""
        query = (
            self.db.collection(SCORES_COLLECTION)
            .where(filter=firestore.FieldFilter("tournamentId", "==", tournament_id))
            .where(filter=firestore.FieldFilter("playerId", "==", player_id))
        )
        scores = []
        for doc in query.stream():
            data = doc.to_dict()
            if data:
                data.setdefault("id", doc.id)
                scores.append(cast(Score, data))
        scores.sort(key=lambda s: s.get("hole", 0))
        return scores

    @_gateway_call
    def get_tournament_leaderboard(self, tournament_id: str) -> list[LeaderboardEntry]:
        """Total gross strokes of every registered player.

        Rows are ordered by total ascending; players without a score (total 0)
        come last. Ties keep roster order.
        """
        roster = self.get_players_for_tournament(tournament_id)
        holes_by_player: dict[str, dict[int, int]] = {}
        for doc in self._stream_where(SCORES_COLLECTION, "tournamentId", tournament_id):
            data = doc.to_dict() or {}
            player_id = data.get("playerId")
            if player_id is None or data.get("hole") is None:
                continue
            holes_by_player.setdefault(player_id, {})[int(data["hole"])] = int(
                data.get("strokes") or 0
            )

        entries: list[LeaderboardEntry] = [
            {
                "player": player,
                "totalGrossScore": sum(holes_by_player.get(player["id"], {}).values()),
            }
            for player in roster
        ]
        entries.sort(key=lambda e: (e["totalGrossScore"] == 0, e["totalGrossScore"]))
        return entries
