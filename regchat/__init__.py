"""
Regulatory compliance chat backend.

Retrieval-augmented chat over federal regulatory filings, plus the thin
document and chat history surfaces that sit on the same stores.
"""
