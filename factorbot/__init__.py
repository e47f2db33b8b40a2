"""Telegram bot that factors integers into primes and finds their GCD and LCM."""

__version__ = "1.0.0"
