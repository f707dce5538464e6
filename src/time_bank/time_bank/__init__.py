"""Time-bank engine package.

Organized by feature modules (punches, pairing, timebank, alerts, reports)
with pure calculation services and a thin Flask controller layer on top.
"""
