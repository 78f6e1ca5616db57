"""Tests de la capa de entrada: botones y ratón → calculadora."""

import pytest

cv2 = pytest.importorskip("cv2")

from app.calculator_app import CalculatorApp


@pytest.fixture
def app(config, fake_voice):
    return CalculatorApp(config=config, voice=fake_voice)


def click(app, *labels):
    for label in labels:
        app.process(label)
    return app.panel.text


def test_buttons_drive_calculator(app):
    assert click(app, '6', '+', '4', '*', '2', '=') == '20'
    assert app.showing_result
    assert app.calc.get_expression() == ''


def test_division_by_zero_and_recovery(app, fake_voice):
    assert click(app, '8', '/', '0', '=') == 'Error'
    assert not app.showing_result
    assert fake_voice.calls[-1] == ('result', 'Error')
    assert click(app, '1') == '1'


def test_voice_announces_actions(app, fake_voice):
    click(app, '5', '+', '3', '=', 'C')
    assert fake_voice.calls == [
        ('symbol', '5'),
        ('operation', '+'),
        ('symbol', '3'),
        ('result', '8'),
        ('clear', None),
    ]


def test_equals_with_nothing_entered(app, fake_voice):
    assert app.process('=') is True
    assert fake_voice.calls == []
    assert app.panel.updates == 0


def test_unknown_labels_are_ignored(app):
    assert app.process(None) is False
    assert app.process('x') is False
    assert app.calc.display_text == ''


def test_mouse_click_presses_button(app):
    button = app.ui.keypad.get('9')
    x, y = button.x + button.w // 2, button.y + button.h // 2
    app.on_mouse(cv2.EVENT_MOUSEMOVE, x, y, 0, None)
    assert app.ui.hover_label == '9'
    app.on_mouse(cv2.EVENT_LBUTTONDOWN, x, y, 0, None)
    assert app.panel.text == '9'
    assert app.ui.pressed_label == '9'


def test_render_frame(app):
    click(app, '6', '+')
    frame = app.render()
    assert frame.shape == (app.ui.height, app.ui.width, 3)


def test_invalid_config_rejected(config, fake_voice):
    config.voice_volume = 2.0
    with pytest.raises(ValueError):
        CalculatorApp(config=config, voice=fake_voice)
