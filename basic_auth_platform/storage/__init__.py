"""
User storage backends (in-memory and PostgreSQL) behind one small contract.
"""
