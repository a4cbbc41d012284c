"""FIX session-layer rules: heartbeats, sequence numbers, settings and environments."""