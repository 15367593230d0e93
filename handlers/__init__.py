"""
handlers/ - Presentation Layer
================================
Console menu handlers. Each handler reads and parses user input,
delegates to the GalleryService, and prints the response back to the user.
No business logic lives here.
"""
