"""Routing: ordered path rules, first structural match wins.

Rules are defined once at startup and never mutated; the matcher walks
them in list order.
"""
