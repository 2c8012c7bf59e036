"""Example capability sets built on utilprog."""
