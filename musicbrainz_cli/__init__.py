"""
musicbrainz-cli: a rate-limited async client for the MusicBrainz web service.
"""

__version__ = "0.1.0"
