import pytest

from gaemi import locator
from gaemi.events import EventCode, EventManager
from gaemi.input import (
    CONTROLLER_DEAD_ZONE_1D,
    CONTROLLER_DEAD_ZONE_2D,
    CONTROLLER_MAX_VALUE,
    ButtonState,
    ControllerAxis,
    ControllerButton,
    ControllerState,
    InputManager,
    KeyboardState,
    MouseState,
    MouseWheelEvent,
    QuitEvent,
    button_state,
    filter_1d,
    filter_2d,
)
from gaemi.linalg import Vec2
from gaemi.log import Log, set_logger
from gaemi.platform import Platform


class FakePlatform(Platform):
    def __init__(self, scancodes=8, controller="pad"):
        self.keys = [0] * scancodes
        self.buttons = 0
        self.mouse = (0, 0)
        self.relative = (0, 0)
        self.controller = controller
        self.controller_buttons = {}
        self.axes = {}
        self.closed = []
        self.cursor = None
        self.relative_mode = None

    def init(self, application_name, x, y, width, height):
        return True

    def update(self, dt):
        pass

    def close(self):
        pass

    def pump_messages(self):
        return False

    def allocate(self, size, aligned):
        return bytearray(size)

    def free(self, block, aligned):
        pass

    def zero_memory(self, block, size):
        return block

    def copy_memory(self, dest, source, size):
        return dest

    def set_memory(self, dest, value, size):
        return dest

    def console_write(self, message, level):
        pass

    def console_write_error(self, message, level):
        pass

    def absolute_time_ms(self):
        return 0

    def absolute_time_seconds(self):
        return 0.0

    def sleep(self, ms):
        pass

    def date(self):
        return ""

    def keyboard_state(self):
        return list(self.keys)

    def mouse_button_mask(self, button):
        return 1 << (button - 1)

    def controller_button(self, controller, button):
        return self.controller_buttons.get(int(button), 0)

    def controller_axis(self, controller, axis):
        return self.axes.get(axis, 0)

    def open_controller(self, index):
        return self.controller

    def close_controller(self, controller):
        self.closed.append(controller)

    def max_scancode(self):
        return len(self.keys)

    def mouse_relative_state(self):
        return (self.buttons, *self.relative)

    def mouse_state(self):
        return (self.buttons, *self.mouse)

    def show_cursor(self, show):
        self.cursor = show

    def set_relative_mouse_mode(self, relative):
        self.relative_mode = relative


@pytest.fixture(autouse=True)
def quiet_services():
    previous = set_logger(Log(path=None, console=lambda message, level: None))
    yield
    locator.reset()
    set_logger(previous)


@pytest.fixture
def platform():
    fake = FakePlatform()
    locator.provide_platform(fake)
    return fake


@pytest.fixture
def manager(platform):
    mgr = InputManager(800, 600)
    assert mgr.init()
    return mgr


@pytest.mark.parametrize(
    "previous, current, expected",
    [
        (0, 0, ButtonState.NONE),
        (0, 1, ButtonState.PRESSED),
        (1, 0, ButtonState.RELEASED),
        (1, 1, ButtonState.HELD),
    ],
)
def test_button_state_transitions(previous, current, expected):
    assert button_state(previous, current) is expected


def test_filter_1d_dead_zone_gives_zero():
    assert filter_1d(CONTROLLER_DEAD_ZONE_1D) == 0.0
    assert filter_1d(-CONTROLLER_DEAD_ZONE_1D) == 0.0


def test_filter_1d_full_range_and_clamped():
    assert filter_1d(CONTROLLER_MAX_VALUE) == pytest.approx(1.0)
    assert filter_1d(-CONTROLLER_MAX_VALUE) == pytest.approx(-1.0)
    assert filter_1d(CONTROLLER_MAX_VALUE * 2) == pytest.approx(1.0)


@pytest.mark.parametrize("raw", [300, 5000, 15000, 29999])
def test_filter_1d_is_odd_and_bounded(raw):
    value = filter_1d(raw)
    assert 0.0 < value < 1.0
    assert filter_1d(-raw) == pytest.approx(-value)


def test_filter_1d_is_monotonic():
    samples = [filter_1d(v) for v in range(0, 32000, 500)]
    assert samples == sorted(samples)


def test_filter_2d_inside_dead_zone_is_zero():
    assert filter_2d(int(CONTROLLER_DEAD_ZONE_2D) - 1, 0) == Vec2(0.0, 0.0)


def test_filter_2d_outside_range_has_unit_length():
    result = filter_2d(CONTROLLER_MAX_VALUE, CONTROLLER_MAX_VALUE)
    assert result.length() == pytest.approx(1.0)
    assert result.x == pytest.approx(result.y)


def test_filter_2d_keeps_direction():
    result = filter_2d(12000, -16000)
    assert 0.0 < result.length() < 1.0
    assert result.y / result.x == pytest.approx(-16000 / 12000)


def test_keyboard_state_queries():
    keyboard = KeyboardState(current=[0, 1, 0, 1], previous=[0, 0, 1, 1])
    assert keyboard.key_value(1)
    assert not keyboard.key_value(0)
    assert keyboard.key_state(0) is ButtonState.NONE
    assert keyboard.key_state(1) is ButtonState.PRESSED
    assert keyboard.key_state(2) is ButtonState.RELEASED
    assert keyboard.key_state(3) is ButtonState.HELD


def test_mouse_state_uses_platform_masks(platform):
    mouse = MouseState(current_buttons=0b011, previous_buttons=0b110)
    assert mouse.button_value(1)
    assert not mouse.button_value(3)
    assert mouse.button_state(1) is ButtonState.PRESSED
    assert mouse.button_state(2) is ButtonState.HELD
    assert mouse.button_state(3) is ButtonState.RELEASED


def test_controller_state_queries():
    state = ControllerState()
    state.current_buttons[ControllerButton.A] = 1
    state.previous_buttons[ControllerButton.B] = 1
    assert state.button_value(ControllerButton.A)
    assert not state.button_value(ControllerButton.B)
    assert state.button_state(ControllerButton.A) is ButtonState.PRESSED
    assert state.button_state(ControllerButton.B) is ButtonState.RELEASED
    assert state.button_state(ControllerButton.X) is ButtonState.NONE


def test_init_sets_up_state(manager, platform):
    state = manager.input_state
    assert state.controller.is_connected
    assert state.keyboard.previous == [0] * len(platform.keys)
    assert state.controller.current_buttons == [0] * int(ControllerButton.MAX)


def test_init_without_controller():
    fake = FakePlatform(controller=None)
    locator.provide_platform(fake)
    mgr = InputManager()
    mgr.init()
    assert not mgr.input_state.controller.is_connected
    mgr.close()
    assert fake.closed == []


def test_close_releases_controller(manager, platform):
    manager.close()
    assert platform.closed == ["pad"]


def test_key_press_then_hold(manager, platform):
    platform.keys[3] = 1
    manager.pre_update()
    manager.update()
    assert manager.input_state.keyboard.key_state(3) is ButtonState.PRESSED
    manager.pre_update()
    manager.update()
    assert manager.input_state.keyboard.key_state(3) is ButtonState.HELD
    platform.keys[3] = 0
    manager.pre_update()
    manager.update()
    assert manager.input_state.keyboard.key_state(3) is ButtonState.RELEASED


def test_mouse_centre_maps_to_origin(manager, platform):
    platform.mouse = (manager.window_width // 2, manager.window_height // 2)
    manager.update()
    assert manager.input_state.mouse.position == Vec2(0.0, 0.0)


def test_mouse_y_axis_points_up(manager, platform):
    platform.mouse = (manager.window_width // 2, 0)
    manager.update()
    assert manager.input_state.mouse.position.y == manager.window_height * 0.5


def test_relative_mode_uses_raw_motion(manager, platform):
    manager.set_mouse_relative_mode(True)
    assert platform.relative_mode is True
    platform.relative = (5, -7)
    manager.update()
    assert manager.input_state.mouse.position == Vec2(5.0, -7.0)
    assert manager.input_state.mouse.is_relative_mode


def test_mouse_button_transitions(manager, platform):
    platform.buttons = 1
    manager.pre_update()
    manager.update()
    assert manager.input_state.mouse.button_state(1) is ButtonState.PRESSED
    platform.buttons = 0
    manager.pre_update()
    manager.update()
    assert manager.input_state.mouse.button_state(1) is ButtonState.RELEASED


def test_wheel_event_and_reset(manager):
    manager.process_event(MouseWheelEvent(2, -3))
    assert manager.input_state.mouse.scroll_wheel == Vec2(2.0, -3.0)
    manager.pre_update()
    assert manager.input_state.mouse.scroll_wheel == Vec2(0.0, 0.0)


def test_quit_event_fires_application_quit(manager):
    events = EventManager()
    events.init()
    received = []

    def on_quit(code, sender, listener, context):
        received.append(code)
        return True

    assert events.subscribe(EventCode.APPLICATION_QUIT, None, on_quit) is True
    manager.process_event(QuitEvent())
    assert received == [EventCode.APPLICATION_QUIT]
    assert events.unsubscribe(EventCode.APPLICATION_QUIT, None, on_quit) is True
    manager.process_event(QuitEvent())
    assert received == [EventCode.APPLICATION_QUIT]


def test_controller_polling(manager, platform):
    platform.controller_buttons[int(ControllerButton.START)] = 1
    platform.axes[ControllerAxis.TRIGGER_LEFT] = CONTROLLER_MAX_VALUE
    platform.axes[ControllerAxis.LEFT_X] = 0
    platform.axes[ControllerAxis.LEFT_Y] = CONTROLLER_MAX_VALUE
    manager.pre_update()
    manager.update()
    controller = manager.input_state.controller
    assert controller.button_state(ControllerButton.START) is ButtonState.PRESSED
    assert controller.left_trigger == pytest.approx(1.0)
    assert controller.right_trigger == 0.0
    assert controller.left_stick.y == pytest.approx(-1.0)
    assert controller.right_stick == Vec2(0.0, 0.0)


def test_set_mouse_cursor(manager, platform):
    manager.set_mouse_cursor(True)
    assert manager.is_cursor_displayed
    assert platform.cursor is True
    manager.set_mouse_cursor(False)
    assert not manager.is_cursor_displayed
    assert platform.cursor is False