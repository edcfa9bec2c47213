"""Booking cost and payment scheduling engine."""
