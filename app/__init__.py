"""Booking notification service package.

Kept as a regular package so ``app`` resolves to this project rather than a
similarly named distribution installed in site-packages.
"""
