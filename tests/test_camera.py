import pytest

from core.camera import CameraController, ControllerState
from core.models import CameraState, ConcaveEarthView, LandmarkDetails, Marker


def _view(lat=10.0, lng=20.0, fov=78.0, marker_ids=("a", "b")):
    markers = [
        Marker(id=mid, name=mid.upper(), country="X", type="city", lat=0.0, lng=float(i * 10))
        for i, mid in enumerate(marker_ids)
    ]
    return ConcaveEarthView(
        title="Concave Earth Navigator",
        focus="",
        camera=CameraState(lat=lat, lng=lng, fov=fov),
        markers=markers,
    )


def _details(landmark_id):
    return LandmarkDetails(id=landmark_id, name=landmark_id, country="X", type="city", lat=0, lng=0)


def test_starts_auto_rotating_with_first_marker_selected():
    controller = CameraController(_view())

    assert controller.state == ControllerState.AUTO_ROTATING
    assert controller.selected_id == "a"
    assert controller.details_pending
    assert controller.camera == CameraState(10.0, 20.0, 78.0)


def test_unloaded_controller_reports_not_loaded():
    controller = CameraController()
    assert not controller.loaded
    assert controller.projected() == []


def test_pointer_down_starts_drag_and_disables_auto_rotate():
    controller = CameraController(_view())
    controller.pointer_down(100, 100)

    assert controller.state == ControllerState.DRAGGING
    assert controller.auto_rotate is False


def test_drag_applies_running_delta():
    controller = CameraController(_view())
    controller.pointer_down(100, 100)

    assert controller.pointer_move(110, 90)
    assert controller.camera.lng == pytest.approx(20.0 - 10 * 0.14)
    assert controller.camera.lat == pytest.approx(10.0 - 10 * 0.1)

    # Same position again: delta is measured from the last move, so nothing changes
    controller.pointer_move(110, 90)
    assert controller.camera.lng == pytest.approx(20.0 - 10 * 0.14)
    assert controller.camera.lat == pytest.approx(10.0 - 10 * 0.1)


def test_move_without_drag_is_ignored():
    controller = CameraController(_view())
    assert controller.pointer_move(500, 500) is False
    assert controller.camera == CameraState(10.0, 20.0, 78.0)


def test_drag_clamps_latitude_and_wraps_longitude():
    controller = CameraController(_view(lng=-179.0))
    controller.pointer_down(0, 0)
    controller.pointer_move(-50, 10_000)

    assert controller.camera.lat == 89.5
    # -179 + 50 * 0.14 = -172
    assert controller.camera.lng == pytest.approx(-172.0)

    controller.pointer_move(1_000, -20_000)
    assert controller.camera.lat == -89.5
    assert -180 < controller.camera.lng <= 180


def test_pointer_up_and_leave_end_drag_without_resuming_rotation():
    controller = CameraController(_view())
    controller.pointer_down(0, 0)
    controller.pointer_up()
    assert controller.state == ControllerState.IDLE
    assert controller.auto_rotate is False

    controller.pointer_down(0, 0)
    controller.pointer_leave()
    assert not controller.is_dragging
    assert controller.pointer_move(10, 10) is False


def test_tick_advances_longitude_only_when_enabled():
    controller = CameraController(_view(lng=179.95))

    assert controller.tick()
    assert controller.camera.lng == pytest.approx(-179.93)

    controller.toggle_auto_rotate()
    assert controller.state == ControllerState.IDLE
    assert controller.tick() is False
    assert controller.camera.lng == pytest.approx(-179.93)


def test_tick_is_suspended_while_dragging():
    controller = CameraController(_view())
    controller.pointer_down(0, 0)
    controller.set_auto_rotate(True)

    assert controller.tick() is False
    assert controller.camera.lng == pytest.approx(20.0)


def test_wheel_zooms_within_bounds_and_prevents_default():
    controller = CameraController(_view())

    assert controller.wheel(100) is True
    assert controller.camera.fov == pytest.approx(81.0)

    controller.wheel(10_000)
    assert controller.camera.fov == 108.0

    controller.wheel(-10_000)
    assert controller.camera.fov == 35.0


def test_reset_restores_initial_camera_but_not_auto_rotate():
    controller = CameraController(_view())
    controller.pointer_down(0, 0)
    controller.pointer_move(40, 40)
    controller.pointer_up()
    controller.wheel(200)

    controller.reset()

    assert controller.camera == CameraState(10.0, 20.0, 78.0)
    assert controller.auto_rotate is False


def test_reset_does_not_alias_initial_camera():
    controller = CameraController(_view())
    controller.reset()
    controller.wheel(100)
    assert controller.initial_camera.fov == 78.0


def test_load_normalizes_supplied_camera():
    controller = CameraController(_view(lat=95.0, lng=190.0, fov=200.0))
    assert controller.camera.lat == 89.5
    assert controller.camera.lng == pytest.approx(-170.0)
    assert controller.camera.fov == 108.0


def test_load_with_no_markers_selects_nothing():
    controller = CameraController(_view(marker_ids=()))
    assert controller.selected_id is None
    assert controller.details_pending is False
    assert controller.projected() == []


def test_resize_guards_zero_height():
    controller = CameraController(_view())
    assert controller.resize(1600, 1000) == pytest.approx(1.6)
    assert controller.resize(800, 0) == 800


def test_newer_selection_wins_over_stale_details():
    controller = CameraController(_view())
    first = controller.select("a")
    second = controller.select("b")

    assert controller.accept_details(first, _details("a")) is False
    assert controller.details is None
    assert controller.details_pending

    assert controller.accept_details(second, _details("b")) is True
    assert controller.details.id == "b"
    assert controller.details_pending is False


def test_projected_follows_camera():
    controller = CameraController(_view(lat=0.0, lng=0.0, marker_ids=("a", "b")))
    assert [m.id for m, _ in controller.projected()] == ["a", "b"]

    controller.pointer_down(0, 0)
    controller.pointer_move(-1_285.7, 0)  # turn roughly 180 degrees
    assert controller.projected() == []
