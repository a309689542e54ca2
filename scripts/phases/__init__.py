"""Phase orchestration scripts for the TransLink ferry feed.

 - generate_ferry_data.py: read the source GTFS feed, apply the SeaBus policy,
   write the filtered/normalised feed and a run summary
"""
