"""Income/expense bookkeeping entries."""
