"""Core application wiring: settings, logging, errors, dependencies"""
