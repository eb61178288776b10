from showcase_wizard.transport.base import Transport
from showcase_wizard.transport.http import HttpTransport

__all__ = ["HttpTransport", "Transport"]
