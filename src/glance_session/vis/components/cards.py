import solara

from glance_session.schemas import DatasetRecord


@solara.component
def DatasetCard(record: DatasetRecord) -> solara.Element:
    """One loaded (or failed) remote dataset."""
    failed = record.status == "failed"
    border = "4px solid #E53935" if failed else "4px solid #4CAF50"
    style = "padding: 8px 12px; border-radius: 8px; box-shadow: 0 2px 4px rgba(0,0,0,0.1); background-color: white;"

    with solara.Column(style=f"{style} border-left: {border}; margin: 4px;"):
        solara.HTML(
            tag="div",
            style="font-size: 0.75rem; color: #666; text-transform: uppercase; letter-spacing: 0.5px;",
            unsafe_innerHTML=record.group,
        )
        solara.Text(record.name, style="font-weight: 500;")
        if failed:
            solara.Text(record.error or "Load failed", style="color: #E53935;")
        else:
            solara.Text(f"Source #{record.source_id}", style="color: #888;")


@solara.component
def PanelCard(title: str, collapsed: bool, children: list[solara.Element] = []) -> solara.Element:
    """Dataset panel container; the body is hidden while collapsed.

    Args:
        title: Panel heading
        collapsed: Mirrors the collapseDatasetPanels setting
        children: Panel body
    """
    with solara.Card(title=None, margin=2, style="min-width: 250px;"):
        solara.HTML(
            tag="h4",
            style="margin-top: 0; margin-bottom: 8px; border-bottom: 2px solid #f0f0f0; padding-bottom: 6px;",
            unsafe_innerHTML=title,
        )
        if not collapsed:
            solara.Column(children=children)
