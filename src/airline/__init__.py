"""Airline fleet manager.

Models a fleet of passenger and cargo planes, computes takeoff weights, and
saves/loads the fleet as XML or JSON.
"""

__version__ = "0.1.0"
