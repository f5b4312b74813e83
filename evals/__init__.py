"""
Evaluation suite -- pipeline properties graded by CodeGrader.

Run evals: pytest evals/ -v

No network: every backend is a ScriptedProvider.
"""
