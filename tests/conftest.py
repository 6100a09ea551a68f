"""Shared test fixtures for the Mailjet transport library."""

import pytest

from mailjet_transport import Address, EmailMessage, MailjetConfig, MockTransport


@pytest.fixture
def mailjet_config() -> MailjetConfig:
    return MailjetConfig(public_key="pub_test_123", private_key="priv_test_456")


@pytest.fixture
def message() -> EmailMessage:
    return EmailMessage(
        subject="Hi",
        sender=Address("bob@x.com", "Bob"),
        to={"alice@y.com": "Alice"},
        text_body="Hello",
        html_body="<p>Hello</p>",
    )


@pytest.fixture
def mock_transport() -> MockTransport:
    return MockTransport()
