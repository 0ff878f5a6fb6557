import streamlit as st
from datetime import datetime
import logging

from config import CountdownConfig, ConfigError, load_config
from countdown_manager import CountdownManager
from scheduler import BlockingScheduler
from state_manager import StateManager
from ui_components import CountdownUI

# Set up logging; the level follows the config on every run
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.getLogger().setLevel(level)


def get_config() -> CountdownConfig:
    try:
        return load_config()
    except ConfigError as e:
        logger.error(f"Invalid countdown configuration: {e}")
        st.error(f"❌ Invalid countdown configuration: {e}. Using defaults.")
        return CountdownConfig()


def run_countdown(config: CountdownConfig, state_manager: StateManager,
                  ui: CountdownUI, scheduler: BlockingScheduler,
                  clock=datetime.now) -> CountdownManager:
    state = state_manager.initialize_state(config, clock)
    ui.render_layout()

    manager = CountdownManager(state, scheduler, ui, clock=clock, config=config)
    if manager.is_expired:
        # Fresh placeholders on every rerun
        ui.write(config.message_slot, config.expired_message)
        return manager

    # Handles left over from an interrupted run belong to a dead scheduler
    manager.stop()
    try:
        manager.start()
        scheduler.run()
    finally:
        manager.stop()
    return manager


def main():
    st.set_page_config(page_title="Promo Countdown", page_icon="⏱️", layout="centered")

    config = get_config()
    configure_logging(config.log_level)

    run_countdown(config, StateManager(), CountdownUI(config), BlockingScheduler())


if __name__ == "__main__":
    main()
