"""
NoteKeeper Backend — Services Layer
====================================

Service Inventory:
    - NoteService: id parsing and CRUD rules on top of NoteStore

NoteService has no HTTP knowledge, so it is unit-tested directly against a
NoteStore without a client.
"""
