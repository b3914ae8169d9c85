"""Project-wide logging setup.

Python imports sitecustomize automatically when it is on sys.path at startup
(run_tests.py puts the repo root there). Scripts run directly call
configure_logging themselves.
"""
from cribbage_calc.logging_setup import configure_logging

configure_logging()
