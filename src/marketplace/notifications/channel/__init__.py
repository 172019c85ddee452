"""Email channel factory.

Provides get_email_channel() / set_email_channel() to swap implementations:
- FakeEmailAdapter for development and testing (``EMAIL_BACKEND=fake``)
- ResendEmailAdapter for production (``EMAIL_BACKEND=resend``)
"""

from marketplace import settings
from marketplace.notifications.channel.email_port import EmailPort
from marketplace.notifications.channel.fake_email import FakeEmailAdapter

_current_channel: EmailPort | None = None


def _build_default() -> EmailPort:
    if settings.EMAIL_BACKEND == "resend":
        from marketplace.notifications.channel.resend_adapter import ResendEmailAdapter

        return ResendEmailAdapter(api_key=settings.RESEND_API_KEY, sender=settings.EMAIL_FROM)
    if settings.EMAIL_BACKEND == "fake":
        return FakeEmailAdapter()
    raise ValueError(f"Unknown email backend: {settings.EMAIL_BACKEND}")


def get_email_channel() -> EmailPort:
    """Return the current email channel, building the configured default on first use."""
    global _current_channel
    if _current_channel is None:
        _current_channel = _build_default()
    return _current_channel


def set_email_channel(channel: EmailPort) -> None:
    """Override the active email channel (useful for tests)."""
    global _current_channel
    _current_channel = channel


def reset_email_channel() -> None:
    global _current_channel
    _current_channel = None
