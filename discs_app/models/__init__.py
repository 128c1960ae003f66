from discs_app.models.api_call_counter import APICallCounter
from discs_app.models.laserdisc import LaserDisc
from discs_app.models.operational_issue import OperationalIssue

__all__ = ["APICallCounter", "LaserDisc", "OperationalIssue"]
