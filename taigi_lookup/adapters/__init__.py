"""Integration adapters connecting the lookup service to chat platforms."""
