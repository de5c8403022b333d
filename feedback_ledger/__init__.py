"""
Feedback Ledger - Verifiable Submission Ledger

An append-mostly store where authenticated identities file structured
feedback against a referenced service. Every submission is validated
against live policy, rate limited per identity, and charged a fee routed
to the designated authority. After filing, a submission can be amended
by its submitter, verified once, and deactivated once.
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
