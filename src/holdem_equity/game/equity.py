"""Monte Carlo estimation of each player's chance to win at showdown."""
import logging
import random
import time
from collections import Counter
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass, field, replace
from typing import Dict, List, Optional, Sequence, Tuple

from holdem_equity.config import get_config
from holdem_equity.core.card import Card
from holdem_equity.core.deck import Deck, exclude_known, generate_full_deck
from holdem_equity.game.showdown import Player, PlayerId, resolve, winners

logger = logging.getLogger(__name__)

BOARD_SIZE = 5


@dataclass
class PlayerEquity:
    """Simulated showdown results for one player."""

    player_id: PlayerId
    player_name: str
    equity: float  # Percent chance of winning, 2 decimals
    win_count: int  # Trials won outright
    tie_count: int = 0  # Trials where the pot was split with others
    trials: int = 0

    def __str__(self) -> str:
        return f"{self.player_name}: {self.equity:.2f}% ({self.win_count} wins, {self.tie_count} ties)"

    def to_json(self) -> dict:
        """Convert to JSON-compatible dictionary."""
        return {
            "player_id": self.player_id,
            "player_name": self.player_name,
            "equity": self.equity,
            "win_count": self.win_count,
            "tie_count": self.tie_count,
            "trials": self.trials,
        }


@dataclass
class EquityResult:
    """Complete results of an equity calculation."""

    players: List[PlayerEquity]
    total_trials: int
    elapsed_ms: float = 0.0

    def for_player(self, player_id: PlayerId) -> Optional[PlayerEquity]:
        """Look up a player's entry by id."""
        return next((p for p in self.players if p.player_id == player_id), None)

    def __str__(self) -> str:
        lines = [f"Equity over {self.total_trials} trials ({self.elapsed_ms:.1f} ms)"]
        lines.extend(f"  {player}" for player in self.players)
        return "\n".join(lines)

    def to_json(self) -> dict:
        """Convert to JSON-compatible dictionary."""
        return {
            "players": [player.to_json() for player in self.players],
            "total_trials": self.total_trials,
            "elapsed_ms": self.elapsed_ms,
        }


@dataclass
class _Tally:
    """Per-call win counters. Tallies from separate chunks add together."""

    wins: Counter = field(default_factory=Counter)
    ties: Counter = field(default_factory=Counter)
    shares: Dict[PlayerId, float] = field(default_factory=dict)

    def credit(self, winner_ids: List[PlayerId]) -> None:
        """Record one trial: a sole winner wins outright, tied winners split one share."""
        if len(winner_ids) == 1:
            self.wins[winner_ids[0]] += 1
            return
        share = 1.0 / len(winner_ids)
        for player_id in winner_ids:
            self.ties[player_id] += 1
            self.shares[player_id] = self.shares.get(player_id, 0.0) + share

    def merge(self, other: '_Tally') -> '_Tally':
        self.wins.update(other.wins)
        self.ties.update(other.ties)
        for player_id, share in other.shares.items():
            self.shares[player_id] = self.shares.get(player_id, 0.0) + share
        return self


def _run_trials(
    contestants: Sequence[Player],
    known_board: Sequence[Card],
    pool: Sequence[Card],
    trials: int,
    rng: random.Random
) -> _Tally:
    """Complete the deal ``trials`` times at random and tally the winners."""
    tally = _Tally()
    board_needed = BOARD_SIZE - len(known_board)

    for _ in range(trials):
        deck = Deck.from_cards(pool)
        board = list(known_board) + deck.draw(board_needed, rng)

        # Board first, then players in seat order, all from the same deck
        completed = []
        for player in contestants:
            missing = player.missing_count
            if missing:
                drawn = iter(deck.draw(missing, rng))
                hole_cards = tuple(c if c is not None else next(drawn) for c in player.hole_cards)
                player = replace(player, hole_cards=hole_cards)
            completed.append(player)

        tally.credit([ph.player_id for ph in winners(resolve(completed, board))])

    return tally


def _simulate_chunk(args: Tuple[Sequence[Player], Sequence[Card], Sequence[Card], int, int]) -> _Tally:
    """Worker entry point: run one chunk of trials with its own seeded generator."""
    contestants, known_board, pool, trials, seed = args
    return _run_trials(contestants, known_board, pool, trials, random.Random(seed))


class EquitySimulator:
    """
    Estimates showdown equity by repeatedly completing the unknown cards.

    Attributes:
        trials: Number of random completions per estimate
        workers: Worker processes; 1 runs the trials in-process
        rng: Randomness source for the deal completions
    """

    def __init__(
        self,
        trials: Optional[int] = None,
        workers: Optional[int] = None,
        rng: Optional[random.Random] = None
    ):
        settings = get_config()
        self.trials = settings.DEFAULT_TRIALS if trials is None else trials
        self.workers = settings.WORKERS if workers is None else workers
        self.rng = rng if rng is not None else random.Random(settings.SEED)
        self.max_players = settings.MAX_PLAYERS

        if self.trials < 1:
            raise ValueError(f"Trial count must be at least 1, got {self.trials}")
        if self.workers < 1:
            raise ValueError(f"Worker count must be at least 1, got {self.workers}")

    def estimate(self, players: Sequence[Player], shared_cards: Sequence[Optional[Card]]) -> EquityResult:
        """
        Estimate each contesting player's chance to win.

        Every active player is dealt in, with unknown hole cards drawn at
        random each trial. Only active players with at least one known hole
        card are reported. Known cards of every player, active or not, are
        out of the deck.

        Args:
            players: Players in seat order
            shared_cards: Community card slots; None marks an unrevealed slot

        Returns:
            EquityResult; empty with zero trials if no active player has a
            known hole card

        Raises:
            ValueError: If the deal is inconsistent (duplicate cards, too
                many players or community cards)
        """
        start = time.perf_counter()

        if len(players) > self.max_players:
            raise ValueError(f"At most {self.max_players} players supported, got {len(players)}")

        known_board = [card for card in shared_cards if card is not None]
        if len(known_board) > BOARD_SIZE:
            raise ValueError(f"At most {BOARD_SIZE} community cards, got {len(known_board)}")

        known_cards = [card for player in players for card in player.known_cards] + known_board
        duplicates = [card for card, count in Counter(known_cards).items() if count > 1]
        if duplicates:
            raise ValueError(f"Card(s) dealt more than once: {', '.join(str(c) for c in duplicates)}")

        # Every active player is dealt in; only those with a known card are reported
        seated = [p for p in players if p.active]
        reported = [p for p in seated if p.known_cards]
        if not reported:
            logger.debug("No player has a known hole card; skipping simulation")
            return EquityResult(players=[], total_trials=0, elapsed_ms=self._elapsed_ms(start))

        pool = exclude_known(generate_full_deck(), known_cards)
        logger.info(
            f"Simulating {self.trials} trials for {len(seated)} players "
            f"({len(known_board)} board cards known, {len(pool)} cards in pool)"
        )

        if self.workers > 1 and self.trials > 1:
            tally = self._run_parallel(seated, known_board, pool)
        else:
            tally = _run_trials(seated, known_board, pool, self.trials, self.rng)

        results = [
            PlayerEquity(
                player_id=player.id,
                player_name=player.name,
                equity=round((tally.wins[player.id] + tally.shares.get(player.id, 0.0)) / self.trials * 100, 2),
                win_count=tally.wins[player.id],
                tie_count=tally.ties[player.id],
                trials=self.trials
            )
            for player in reported
        ]

        elapsed_ms = self._elapsed_ms(start)
        logger.info(f"Equity calculation finished in {elapsed_ms:.1f} ms")
        return EquityResult(players=results, total_trials=self.trials, elapsed_ms=elapsed_ms)

    def _run_parallel(self, contestants: List[Player], known_board: List[Card], pool: List[Card]) -> _Tally:
        """Split the trials into one chunk per worker and sum the tallies."""
        workers = min(self.workers, self.trials)
        chunk = self.trials // workers
        sizes = [chunk] * workers
        sizes[-1] += self.trials - chunk * workers

        args_list = [
            (contestants, known_board, pool, size, self.rng.randrange(2 ** 32))
            for size in sizes
        ]
        logger.debug(f"Running {self.trials} trials across {workers} workers: {sizes}")

        tally = _Tally()
        with ProcessPoolExecutor(max_workers=workers) as executor:
            for partial in executor.map(_simulate_chunk, args_list):
                tally.merge(partial)
        return tally

    @staticmethod
    def _elapsed_ms(start: float) -> float:
        return (time.perf_counter() - start) * 1000


def estimate_equity(
    players: Sequence[Player],
    shared_cards: Sequence[Optional[Card]],
    trials: Optional[int] = None,
    rng: Optional[random.Random] = None,
    workers: Optional[int] = None
) -> EquityResult:
    """
    Estimate each contesting player's chance to win at showdown.

    Args:
        players: Players in seat order, hole card slots None where unknown
        shared_cards: Community card slots, None where unrevealed
        trials: Random completions to run; defaults to the configured value
        rng: Seedable randomness source for reproducible results
        workers: Worker processes to spread the trials over

    Returns:
        EquityResult with one entry per active player holding a known card
    """
    simulator = EquitySimulator(trials=trials, workers=workers, rng=rng)
    return simulator.estimate(players, shared_cards)


def estimate_quick_equity(
    players: Sequence[Player],
    shared_cards: Sequence[Optional[Card]],
    rng: Optional[random.Random] = None
) -> EquityResult:
    """Fast estimate for interactive use."""
    return estimate_equity(players, shared_cards, trials=get_config().FAST_TRIALS, rng=rng)


def estimate_full_equity(
    players: Sequence[Player],
    shared_cards: Sequence[Optional[Card]],
    rng: Optional[random.Random] = None,
    workers: Optional[int] = None
) -> EquityResult:
    """Thorough estimate trading latency for precision."""
    return estimate_equity(
        players, shared_cards, trials=get_config().THOROUGH_TRIALS, rng=rng, workers=workers
    )
