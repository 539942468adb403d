"""
Session Manager - Creates and manages play sessions.

LIFECYCLE:
1. Start: generate the configuration and commands, replay them into
   a history, and schedule the reveal
2. Reveal: phase events advance the session (memorize, commands, answer)
3. Submit: the answer is validated and scored, exactly once
4. Review: the history and score are read back (export())

Only one session is current. Starting a new session supersedes the
previous one: its pending timers are cancelled and any late callback
or submission against it is rejected.

Sessions are in-memory only. Each session draws from its own
random.Random, so two sessions never share random state.
"""

from __future__ import annotations
import logging
import random
import time
import uuid
from dataclasses import dataclass
from typing import Any, Callable

from ..config import GameConfig
from ..engine_core.command import Command
from ..engine_core.errors import AlreadySubmittedError, StaleSessionError
from ..engine_core.reducer import HistoryStep, SequenceResult
from ..engine_core.scoring import ScoreResult
from ..games.die import check_face, pick_target_face
from ..games.grid import score_grid
from ..games.registry import get_game
from ..games.voxel import score_cube
from ..schemas import (
    SessionExport,
    command_info,
    history_step_info,
    parse_answer,
    score_info,
    state_to_data,
)
from .phases import Phase, PhaseEvent, PhaseScheduler, build_timeline

logger = logging.getLogger(__name__)


@dataclass
class Session:
    """
    One run from configuration to score.

    The engine output (initial state, commands, replay) is fixed at
    creation; only the phase fields and the score change afterwards.
    """
    session_id: str
    game: str
    generation: int
    created_at: float
    replay: SequenceResult
    seed: int | None = None
    target_face: str | None = None

    # Reveal progress
    phase: Phase = Phase.IDLE
    command_index: int | None = None
    show_command_text: bool = False

    # Result
    answer: Any = None
    score: ScoreResult | None = None

    @property
    def initial_state(self) -> Any:
        return self.replay.initial_state

    @property
    def final_state(self) -> Any:
        return self.replay.final_state

    @property
    def commands(self) -> tuple[Command, ...]:
        return self.replay.commands

    @property
    def history(self) -> tuple[HistoryStep, ...]:
        return self.replay.history

    @property
    def is_submitted(self) -> bool:
        return self.score is not None

    @property
    def current_command(self) -> Command | None:
        """The command on screen during the reveal, if its text is showing."""
        if self.phase != Phase.REVEAL or not self.show_command_text or self.command_index is None:
            return None
        return self.commands[self.command_index]

    def advance(self, event: PhaseEvent) -> None:
        """Apply a phase event. Submitted sessions stay in RESULT."""
        if self.phase == Phase.RESULT:
            return
        self.phase = event.phase
        self.command_index = event.command_index
        self.show_command_text = event.show_text


class SessionManager:
    """
    Manages play sessions.

    Responsibilities:
    - Build sessions from the game registry and configuration
    - Drive the reveal through a PhaseScheduler
    - Score submissions once, on the current session only
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        scheduler: PhaseScheduler | None = None,
    ):
        self.config = config or GameConfig()
        self.scheduler = scheduler or PhaseScheduler()
        self._current: Session | None = None

    @property
    def current(self) -> Session | None:
        return self._current

    def start_session(
        self,
        game: str,
        command_count: int | None = None,
        seed: int | None = None,
        schedule: bool = True,
        listener: Callable[[Session, PhaseEvent], None] | None = None,
    ) -> Session:
        """
        Start a new session, superseding the current one.

        Args:
            game: "grid", "die" or "voxel"
            command_count: Commands to generate (config default if None)
            seed: Seed for this session's random source (fresh entropy if None)
            schedule: Run the timed reveal; if False the caller advances phases
            listener: Called with (session, event) after each scheduled phase event

        Returns:
            The new, current Session
        """
        definition = get_game(game)
        domain_config = self.config.for_domain(game)
        count = domain_config.command_count if command_count is None else command_count

        rng = random.Random(seed)
        initial = definition.initial_state(rng, domain_config)
        commands = definition.generator(rng, domain_config).generate(count)
        replay = definition.reducer.run(initial, commands)
        target_face = pick_target_face(rng) if game == "die" else None

        # Invalidate the previous session's timers before it stops being current
        self.scheduler.cancel()
        previous = self._current
        if previous is not None:
            logger.info("session %s superseded", previous.session_id)

        session = Session(
            session_id=str(uuid.uuid4()),
            game=game,
            generation=0,
            created_at=time.time(),
            replay=replay,
            seed=seed,
            target_face=target_face,
        )
        self._current = session

        timeline = build_timeline(len(commands), domain_config.timing)
        if schedule:
            def on_event(event: PhaseEvent) -> None:
                session.advance(event)
                if listener is not None:
                    listener(session, event)

            session.generation = self.scheduler.start(timeline, on_event)
        else:
            session.generation = self.scheduler.generation

        logger.info("session %s started: %s with %d command(s)", session.session_id, game, count)
        return session

    def get_session(self, session_id: str) -> Session:
        """The current session, if session_id names it."""
        session = self._current
        if session is None or session.session_id != session_id:
            raise StaleSessionError(f"Session {session_id} is not the current session")
        return session

    def advance(self, session_id: str, event: PhaseEvent) -> Session:
        """Manually advance the current session (for unscheduled sessions)."""
        session = self.get_session(session_id)
        session.advance(event)
        return session

    def submit(self, session_id: str, answer: Any) -> ScoreResult:
        """
        Validate and score an answer. Allowed once per session.

        Raises:
            StaleSessionError: session_id is not the current session
            AlreadySubmittedError: the session was already scored
            pydantic.ValidationError: the answer breaks the input contract
        """
        session = self.get_session(session_id)
        if session.is_submitted:
            raise AlreadySubmittedError(f"Session {session_id} was already submitted")

        parsed = parse_answer(session.game, answer)
        score = self._score(session, parsed)

        self.scheduler.cancel()
        session.answer = parsed
        session.score = score
        session.phase = Phase.RESULT
        session.command_index = None
        session.show_command_text = False

        logger.info(
            "session %s scored %d/%d", session_id, score.correct_count, score.total_cells
        )
        return score

    def end_session(self) -> None:
        """Drop the current session and cancel its timers."""
        self.scheduler.cancel()
        if self._current is not None:
            logger.info("session %s ended", self._current.session_id)
        self._current = None

    def export(self, session_id: str) -> SessionExport:
        """Review data for the current session."""
        session = self.get_session(session_id)
        return export_session(session)

    def _score(self, session: Session, answer: Any) -> ScoreResult:
        final = session.final_state
        if session.game == "grid":
            return score_grid(final, answer.to_rows())
        if session.game == "voxel":
            return score_cube(final, answer.cells)
        correct = check_face(final, session.target_face, answer.value)
        return ScoreResult.from_marks({session.target_face: correct})


def export_session(session: Session) -> SessionExport:
    """Build the review model for a session."""
    return SessionExport(
        session_id=session.session_id,
        game=session.game,
        title=get_game(session.game).title,
        phase=session.phase.value,
        seed=session.seed,
        initial_state=state_to_data(session.initial_state),
        commands=[command_info(c) for c in session.commands],
        history=[history_step_info(step) for step in session.history],
        final_state=state_to_data(session.final_state),
        target_face=session.target_face,
        score=score_info(session.score) if session.score is not None else None,
    )
