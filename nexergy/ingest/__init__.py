"""
Source payload parsers (JSON / CSV text -> Arrow tables).

Fetching the payloads and writing curated partitions are handled
outside this package.
"""
