"""Top-level views for the two routes and the dataset panel area."""

from typing import Callable

import solara

from glance_session.schemas import AppState
from glance_session.vis.components.cards import DatasetCard, PanelCard


@solara.component
def BrowserWarning(on_dismiss: Callable[[], None]):
    with solara.Row(style="background-color: #FFF3E0; padding: 8px; align-items: center;"):
        solara.Text(
            "Some features may not work in this browser.", style="color: #E65100;"
        )
        solara.v.Spacer()
        solara.Button("Dismiss", text=True, on_click=on_dismiss)


@solara.component
def LandingView(on_open: Callable[[], None]):
    with solara.Column(
        style="height: 60vh; justify-content: center; align-items: center; color: #888;"
    ):
        solara.Markdown("## Glance")
        solara.Markdown("Open remote datasets with `?name=...&url=...` or start empty.")
        solara.Button("Open viewer", color="primary", on_click=on_open)


@solara.component
def DatasetPanels(
    state: AppState, renderers: dict[str, Callable], on_toggle: Callable[[bool], None]
):
    """Registered panels followed by the dataset list."""
    collapsed = state.collapse_dataset_panels

    with solara.Column(style="min-width: 280px;"):
        with solara.Row():
            solara.Text("Datasets", style="font-weight: 600;")
            solara.v.Spacer()
            solara.Button(
                "Expand" if collapsed else "Collapse",
                text=True,
                on_click=lambda: on_toggle(not collapsed),
            )

        for panel in state.panels:
            renderer = renderers.get(panel.component)
            body = [renderer(**panel.props)] if renderer else []
            PanelCard(title=panel.title or panel.component, collapsed=collapsed, children=body)

        if not state.datasets:
            solara.Text("No datasets loaded.", style="color: #888;")
        for record in state.datasets:
            DatasetCard(record)


@solara.component
def AppView(
    state: AppState,
    renderers: dict[str, Callable],
    on_close: Callable[[], None],
    on_toggle: Callable[[bool], None],
):
    with solara.Row(style="align-items: flex-start;"):
        DatasetPanels(state, renderers, on_toggle)
        with solara.Column(style="flex: 1;"):
            with solara.Row():
                solara.v.Spacer()
                solara.Button("Home", text=True, on_click=on_close)
            solara.Markdown("Views are drawn by the rendering subsystem.")
