"""Helpers for scheduling the delayed opponent reply."""

import time


def deadline_after(seconds, now=None):
    return (time.time() if now is None else now) + seconds


def time_remaining(deadline, now=None):
    return deadline - (time.time() if now is None else now)


def is_due(deadline, now=None):
    return time_remaining(deadline, now) <= 0
