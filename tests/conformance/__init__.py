"""
Conformance Test Suite

This suite defines the NORMATIVE behavior of the lessons.
Any compliant implementation MUST pass these tests.

The tests are organized by invariant:
1. default_policies.py - Which values each booking constructor replaces
2. closure_isolation.py - Captured state is owned by exactly one function
3. poll_invariants.py - Counters stay non-negative and fixed in length
4. timer_ordering.py - Timers fire after their delay, in delay order

These tests use hypothesis for property-based testing.
"""
