"""Core training and modeling logic."""
