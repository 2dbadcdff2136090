"""ZoomPan: mouse-masked panning and zooming, and the inverse mouse mapping."""

import pytest

from src.config.viewer_config import CameraConfig
from src.views.tkinter_view.zoom_pan import ZoomPan


class TestZoomPan:

    def test_defaults(self):
        zoomer = ZoomPan()
        assert zoomer.get_zoom_scale() == 1.0
        assert zoomer.get_pan_offset() == (0.0, 0.0)
        assert zoomer.mouse_mask == ZoomPan.SHIFT
        assert not zoomer.is_mouse_captured()

    def test_shift_left_drag_pans(self):
        zoomer = ZoomPan()
        zoomer.press(100, 100, ZoomPan.LEFT_BUTTON, (ZoomPan.SHIFT,))
        assert zoomer.is_mouse_captured()
        zoomer.drag(130, 80)
        assert zoomer.get_pan_offset() == (30.0, -20.0)
        zoomer.release(130, 80)
        assert not zoomer.is_mouse_captured()

    def test_plain_press_is_left_to_application(self):
        zoomer = ZoomPan()
        zoomer.press(100, 100, ZoomPan.LEFT_BUTTON, ())
        zoomer.drag(150, 150)
        assert not zoomer.is_mouse_captured()
        assert zoomer.get_pan_offset() == (0.0, 0.0)
        assert zoomer.get_mouse_coord() == (150.0, 150.0)

    def test_no_mask_pans_on_plain_press(self):
        zoomer = ZoomPan(mouse_mask=ZoomPan.NONE)
        zoomer.press(0, 0, ZoomPan.LEFT_BUTTON)
        zoomer.drag(5, 5)
        assert zoomer.get_pan_offset() == (5.0, 5.0)

    def test_right_drag_up_zooms_in_about_press_point(self):
        zoomer = ZoomPan()
        zoomer.press(200, 200, ZoomPan.RIGHT_BUTTON, (ZoomPan.SHIFT,))
        zoomer.drag(200, 100)
        assert zoomer.get_zoom_scale() > 1.0
        # The press point stays where it was on screen.
        pan_x, pan_y = zoomer.get_pan_offset()
        scale = zoomer.get_zoom_scale()
        assert (200 - pan_x) / scale == pytest.approx(200.0)
        assert (200 - pan_y) / scale == pytest.approx(200.0)

    def test_wheel_keeps_point_under_cursor(self):
        zoomer = ZoomPan()
        zoomer.wheel(300, 150, 2)
        assert zoomer.get_zoom_scale() == pytest.approx(1.1 ** 2)
        assert zoomer.get_mouse_coord() == pytest.approx((300.0, 150.0))

    def test_zoom_is_clamped(self):
        zoomer = ZoomPan(camera=CameraConfig(min_zoom=0.5, max_zoom=2.0))
        zoomer.set_zoom_scale(10.0)
        assert zoomer.get_zoom_scale() == 2.0
        zoomer.set_zoom_scale(0.01)
        assert zoomer.get_zoom_scale() == 0.5

    def test_mouse_coord_removes_transform(self):
        zoomer = ZoomPan()
        zoomer.set_zoom_scale(2.0)
        zoomer.set_pan_offset(10.0, 20.0)
        zoomer.move(50, 60)
        assert zoomer.get_mouse_coord() == (20.0, 20.0)

    def test_reset(self):
        zoomer = ZoomPan()
        zoomer.set_zoom_scale(3.0)
        zoomer.set_pan_offset(1.0, 2.0)
        zoomer.reset()
        assert zoomer.get_zoom_scale() == 1.0
        assert zoomer.get_pan_offset() == (0.0, 0.0)

    def test_transform_applies_pan_then_zoom(self, context):
        zoomer = ZoomPan()
        zoomer.set_pan_offset(5.0, 6.0)
        zoomer.set_zoom_scale(2.0)
        zoomer.transform(context)
        assert context.calls == [("translate", (5.0, 6.0)), ("scale", (2.0,))]

    def test_unknown_mask_rejected(self):
        with pytest.raises(ValueError):
            ZoomPan(mouse_mask="alt")

    def test_modifiers_from_event_state(self):
        class Event:
            state = 0x0001 | 0x0004
        assert set(ZoomPan.modifiers_of(Event())) == {ZoomPan.SHIFT, ZoomPan.CONTROL}
