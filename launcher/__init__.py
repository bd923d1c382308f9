# launcher - app icon assets for React Native projects
__version__ = "1.0.0"
