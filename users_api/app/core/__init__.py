"""Settings, logging and error rendering shared by the whole app."""
