"""Retrieval of the CMS data set: transports, aggregate fetch and cache."""
