import streamlit as st
from typing import Any, Dict
import logging

from config import CountdownConfig, UNITS
from timer_component import SLOT_STYLE, message_html, slot_html

logger = logging.getLogger(__name__)


class UnknownSlotError(KeyError):
    pass


class CountdownUI:
    """Streamlit display sink: one placeholder per slot id.

    `container` is anything exposing Streamlit's `markdown`, `columns` and
    `empty`; it defaults to the `st` module itself.
    """

    def __init__(self, config: CountdownConfig, container: Any = None):
        self.config = config
        self.container = container if container is not None else st
        self._placeholders: Dict[str, Any] = {}
        self._labels = {config.slot_ids[unit]: config.labels[unit] for unit in UNITS}

    def render_layout(self) -> None:
        self.container.markdown(SLOT_STYLE, unsafe_allow_html=True)
        self.container.markdown(f"### {self.config.title}")

        cols = self.container.columns(len(UNITS))
        for unit, col in zip(UNITS, cols):
            self._placeholders[self.config.slot_ids[unit]] = col.empty()

        self._placeholders[self.config.message_slot] = self.container.empty()

    def write(self, slot_id: str, text: str) -> None:
        placeholder = self._placeholders.get(slot_id)
        if placeholder is None:
            logger.error(f"No display slot named {slot_id!r}")
            raise UnknownSlotError(slot_id)

        if slot_id == self.config.message_slot:
            placeholder.markdown(message_html(slot_id, text), unsafe_allow_html=True)
        else:
            placeholder.markdown(slot_html(slot_id, text, self._labels[slot_id]), unsafe_allow_html=True)
