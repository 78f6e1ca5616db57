"""Fixtures compartidas: motor de voz falso y configuración sin voz."""

import pytest

from config.accessibility import AccessibilityConfig


class FakeVoiceInfo:
    def __init__(self, voice_id, name, languages=()):
        self.id = voice_id
        self.name = name
        self.languages = list(languages)


class FakeEngine:
    """Sustituto de pyttsx3.Engine que registra lo que se habla."""

    def __init__(self, voices=None):
        self.properties = {
            'voices': voices if voices is not None else [
                FakeVoiceInfo('english', 'English', ['en']),
                FakeVoiceInfo('spanish-es', 'Spanish', ['es']),
            ],
        }
        self.said = []

    def setProperty(self, name, value):
        self.properties[name] = value

    def getProperty(self, name):
        return self.properties.get(name)

    def say(self, text):
        self.said.append(text)

    def runAndWait(self):
        pass


class FakeVoice:
    """Sustituto de VoiceFeedback para la aplicación."""

    def __init__(self):
        self.calls = []

    def speak(self, text):
        self.calls.append(('speak', text))

    def speak_symbol(self, symbol):
        self.calls.append(('symbol', symbol))

    def speak_operation(self, operation):
        self.calls.append(('operation', operation))

    def speak_result(self, display_text):
        self.calls.append(('result', display_text))

    def speak_clear(self):
        self.calls.append(('clear', None))


@pytest.fixture
def config():
    return AccessibilityConfig()


@pytest.fixture
def fake_engine():
    return FakeEngine()


@pytest.fixture
def fake_voice():
    return FakeVoice()
