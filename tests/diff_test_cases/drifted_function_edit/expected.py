#!/usr/bin/env python3
# Inventory helpers
#
# Added after the patch was written.

import json


def load(path):
    with open(path) as f:
        return json.load(f)


def total(items):
    count = 0.0
    for item in items:
        count += item["qty"]
    return count


def report(items):
    print("items:", len(items))
    print("total:", total(items))
    print("done")
