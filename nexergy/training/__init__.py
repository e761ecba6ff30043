"""
Training: autoregressive price model (lagged features + linear GD).

Single paradigm: day-ahead batch training on a closed, finite table.
- rows are ordered by timestamp before any feature is derived
- the model never sees the held-out year during fitting
- every run is compared with the persistence forecast
"""
