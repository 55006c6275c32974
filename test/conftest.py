from types import SimpleNamespace

import pytest


class FakeLogger:
    def __init__(self):
        self.messages = []
        self.warnings = []

    def info(self, message):
        self.messages.append(message)

    def warn(self, message):
        self.warnings.append(message)


class FakePublisher:
    def __init__(self):
        self.sent = []

    def publish(self, msg):
        self.sent.append(msg)


@pytest.fixture
def logger():
    return FakeLogger()


@pytest.fixture
def publisher():
    return FakePublisher()


@pytest.fixture
def make_status():
    def factory(external_control=True, contactors=True, fault=False, voltage=48.2):
        return SimpleNamespace(
            external_control=external_control,
            contactors=contactors,
            fault=fault,
            voltage=voltage,
        )
    return factory
