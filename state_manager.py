import streamlit as st
from typing import Any, Callable, MutableMapping, Optional
from datetime import datetime
import logging

from config import CountdownConfig
from countdown_state import CountdownState

logger = logging.getLogger(__name__)


class StateManager:
    STATE_KEY = "countdown_state"

    def __init__(self, session: Optional[MutableMapping[str, Any]] = None):
        self.session = session if session is not None else st.session_state

    def initialize_state(self, config: CountdownConfig,
                         clock: Callable[[], datetime] = datetime.now) -> CountdownState:
        """
        Return the session's countdown state, creating it on first use so
        reruns keep the same target moment
        """
        if self.STATE_KEY not in self.session:
            state = CountdownState.create(clock(), config.offset_days)
            self.session[self.STATE_KEY] = state
            logger.info(f"New countdown target: {state.target.isoformat()}")
        return self.session[self.STATE_KEY]

    def clear_state(self) -> None:
        """
        Forget the session's countdown so the next run starts a new one
        """
        if self.STATE_KEY in self.session:
            del self.session[self.STATE_KEY]
