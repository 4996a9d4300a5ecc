"""Test helpers package."""

from tests.helpers.measurers import CharMeasurer, RecordingMeasurer
from tests.helpers.wait import wait_until

__all__ = ["CharMeasurer", "RecordingMeasurer", "wait_until"]
