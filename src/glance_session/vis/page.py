"""Root page for the Solara application.

One session is created per page instance, with its history kept in the
Solara router. URL parameters are applied once on mount and the session is
closed when the page unmounts.
"""

import logging
from pathlib import Path

import solara

from glance_session.infrastructure.history import RouterHistory
from glance_session.services.settings import SETTINGS_PATH, SettingsStorage, SettingsStore
from glance_session.session import create_session

# --- Logging Configuration ---
logger = logging.getLogger("glance_session")
logger.setLevel(logging.INFO)
if logger.handlers:
    logger.handlers.clear()

Path("outputs").mkdir(exist_ok=True)
file_handler = logging.FileHandler("outputs/session.log")
file_handler.setFormatter(
    logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
)
stream_handler = logging.StreamHandler()
stream_handler.setFormatter(
    logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
)

logger.addHandler(file_handler)
logger.addHandler(stream_handler)


@solara.component
def Page():
    router = solara.use_router()
    history = solara.use_memo(lambda: RouterHistory(router), [])
    # The router object is rebuilt on navigation
    history.router = router

    session = solara.use_memo(
        lambda: create_session(
            "glance-root",
            history=history,
            location=history,
            settings=SettingsStore(SettingsStorage(SETTINGS_PATH)),
        ),
        [],
    )

    def bootstrap():
        session.process_url_args()
        return session.close

    # We only run this once on mount
    solara.use_effect(bootstrap, [])

    # Browser back/forward shows up as a router change
    solara.use_effect(history.sync_location, [router.search])

    return session.app.render()
