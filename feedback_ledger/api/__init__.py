"""HTTP API for the Feedback Ledger (FastAPI)."""
