"""
Dungeon Test Suite

Test structure:
- unit/: Test components in isolation
- integration/: Test whole turns through the processor and the console
- mocks/: Test-only things with scripted reactions
"""
