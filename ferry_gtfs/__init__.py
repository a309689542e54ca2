"""GTFS feed policy for the TransLink SeaBus ferry."""
