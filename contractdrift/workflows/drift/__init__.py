"""Drift analysis workflows: intake, engine, and report assembly."""
