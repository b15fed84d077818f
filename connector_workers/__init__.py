"""Attempt execution and job dispatch core for connector workers."""
