"""
Journal Client.

Everything that runs on the consuming side of the HTTP API: the httpx
client, and pure computations over the entry list it fetched (streaks,
export documents, tag groupings). Nothing here touches the database.
"""
