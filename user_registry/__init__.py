"""User Registry: in-memory user records keyed by email."""
