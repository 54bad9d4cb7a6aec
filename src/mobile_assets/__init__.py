"""Generate platform icon and splash-screen variants for Cordova-style projects."""

__version__ = "0.4.0"
