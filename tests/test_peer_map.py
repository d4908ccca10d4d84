from __future__ import annotations

import pytest

from conftest import make_peer
from impact_dashboard.data.defaults import PRIMARY_CODE
from impact_dashboard.data.resolver import resolve
from impact_dashboard.ui.components.peer_map import (
    MAP_CENTER,
    MAP_ZOOM,
    PEER_MARKER_SIZE,
    PRIMARY_MARKER_SIZE,
    peer_map_figure,
    popup_html,
    tile_sources,
)


def test_map_places_primary_first_with_code(default_view_model) -> None:
    fig = peer_map_figure(default_view_model)
    primary = fig.data[0]

    assert list(primary.text) == [PRIMARY_CODE]
    assert primary.marker.size == PRIMARY_MARKER_SIZE
    assert (primary.lat[0], primary.lon[0]) == (34.3664, -89.5192)
    assert all(trace.marker.size == PEER_MARKER_SIZE for trace in fig.data[1:])


def test_map_view_and_tiles(default_view_model) -> None:
    fig = peer_map_figure(default_view_model, tiles="https://{s}.tiles.test/{z}/{x}/{y}.png")

    assert fig.layout.map.center.lat == MAP_CENTER["lat"]
    assert fig.layout.map.center.lon == MAP_CENTER["lon"]
    assert fig.layout.map.zoom == MAP_ZOOM
    assert list(fig.layout.map.layers[0].source) == [
        "https://a.tiles.test/{z}/{x}/{y}.png",
        "https://b.tiles.test/{z}/{x}/{y}.png",
        "https://c.tiles.test/{z}/{x}/{y}.png",
        "https://d.tiles.test/{z}/{x}/{y}.png",
    ]


def test_tile_template_without_subdomain_is_used_as_is() -> None:
    assert tile_sources("https://tiles.test/{z}/{x}/{y}.png") == ["https://tiles.test/{z}/{x}/{y}.png"]


def test_map_with_no_peers_still_shows_primary() -> None:
    fig = peer_map_figure(resolve({"peerAreas": []}))

    assert len(fig.data) == 1
    assert "Oxford (Primary)" in fig.layout.annotations[0].text


def test_map_scales_to_many_peers() -> None:
    peers = [make_peer(f"Peer Town {index}, ST", lat=30.0 + index, lng=-90.0 + index) for index in range(10)]

    fig = peer_map_figure(resolve({"peerAreas": peers}))

    assert len(fig.data) == 11
    names = [trace.name for trace in fig.data]
    assert len(set(names)) == 11


def test_colliding_peer_labels_fall_back_to_full_name() -> None:
    peers = [make_peer("Athens, GA"), make_peer("Athens, OH")]

    fig = peer_map_figure(resolve({"peerAreas": peers}))

    assert [trace.name for trace in fig.data[1:]] == ["Athens, GA", "Athens, OH"]


def test_popup_lists_scores_and_escapes_name() -> None:
    view_model = resolve({"peerAreas": [make_peer("<Bad> & Co, ST", pillars={"health": 61.5, "talent": 80, "competitiveness": 75})]})
    peer = view_model.peer_areas[0]

    popup = popup_html(peer)

    assert "&lt;Bad&gt; &amp; Co" in popup
    assert "Health & Wellness: <b>61.5</b>" in popup
    assert "Talent Pipeline: <b>80</b>" in popup
    assert "Primary Focus Area" not in popup


@pytest.mark.parametrize("attribute", ["health", "talent", "competitiveness"])
def test_primary_popup_is_marked(default_view_model, attribute) -> None:
    popup = popup_html(default_view_model.primary_area)

    assert "Primary Focus Area" in popup
    assert f"<b>{int(getattr(default_view_model.primary_area, attribute))}</b>" in popup
