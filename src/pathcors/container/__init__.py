"""Ordering helpers shared by pluggable components."""
