"""Core infrastructure shared by gcibot modules."""
