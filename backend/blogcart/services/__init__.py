"""Services Layer — request handlers per resource group.

Invariants:
    - One handler class per resource group, bound to a request-scoped session
    - Handlers own transaction boundaries; the gateway only flushes
    - Article writes go through article_writes.ValidatedArticleWriter

Design Decisions:
    - One handler file per resource group for locality (ADR: no god objects)
"""
