"""
Fetch-and-normalize services built on a TransportClient.
"""
