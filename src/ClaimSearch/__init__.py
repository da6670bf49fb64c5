"""ClaimSearch: compile content-discovery requests into search engine queries."""

__version__ = "0.1.0"
