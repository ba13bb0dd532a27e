# Services package init
"""
FriendList API: Services Layer
=================================

What:  Business logic sitting between routes (HTTP) and the document store.
Why:   Routes handle HTTP; services validate payloads, call the repository,
       and decide which error and status code each failure becomes.

Service Inventory:
    - ResourceService (base): create/list/get/update/delete over one collection
    - FriendService: friends collection, name and age checks
    - PostService: posts collection, title and content checks
"""
