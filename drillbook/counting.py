"""Hash-based counting and lookup over integer sequences."""

from collections import Counter
from itertools import groupby, pairwise


def two_sum(nums, target):
    """Return ``[i, j]`` with ``i < j`` and ``nums[i] + nums[j] == target``, or ``[]``.

    When a value repeats, the most recent index seen for it is used.
    """
    seen = {}
    for index, value in enumerate(nums):
        complement = target - value
        if complement in seen:
            return [seen[complement], index]
        seen[value] = index
    return []


def longest_consecutive(nums):
    """Return the length of the longest run of consecutive integers in ``nums``."""
    values = set(nums)
    longest = 0
    for value in values:
        if value - 1 in values:
            continue
        length = 1
        while value + length in values:
            length += 1
        longest = max(longest, length)
    return longest


def single_number(nums):
    """Return the smallest value that occurs exactly once, or -1 if there is none."""
    for value, group in groupby(sorted(nums)):
        if sum(1 for _ in group) == 1:
            return value
    return -1


def majority_element(nums):
    """Return the value occurring more than ``len(nums) // 2`` times.

    Raises ValueError when no such value exists.
    """
    if not nums:
        raise ValueError("majority element of an empty sequence")
    candidate = nums[0]
    count = 1
    for value in nums[1:]:
        count += 1 if value == candidate else -1
        if count == 0:
            candidate = value
            count = 1
    if nums.count(candidate) <= len(nums) // 2:
        raise ValueError("no value occurs in more than half of the positions")
    return candidate


def contains_duplicate(nums):
    """Return True if any value occurs more than once."""
    return len(set(nums)) < len(nums)


def contains_nearby_duplicate(nums, k):
    """Return True if equal values occur at indices at most ``k`` apart."""
    last_seen = {}
    for index, value in enumerate(nums):
        if value in last_seen and index - last_seen[value] <= k:
            return True
        last_seen[value] = index
    return False


def majority_elements(nums):
    """Return the values occurring more than ``len(nums) // 3`` times, in first-seen order."""
    threshold = len(nums) // 3
    return [value for value, count in Counter(nums).items() if count > threshold]


def missing_number(nums):
    """Return the value missing from ``nums``, which holds distinct numbers from ``0..n``."""
    ordered = sorted(nums)
    if not ordered or ordered[0] != 0:
        return 0
    if ordered[-1] != len(ordered):
        return len(ordered)
    return next((index for index, value in enumerate(ordered) if index != value), 0)


def find_duplicate(nums):
    """Return the smallest value that occurs more than once, or -1."""
    return next((b for a, b in pairwise(sorted(nums)) if a == b), -1)


def subarray_sum(nums, k):
    """Return the number of contiguous subarrays whose sum equals ``k``."""
    prefix_counts = Counter({0: 1})
    running = 0
    total = 0
    for value in nums:
        running += value
        total += prefix_counts.get(running - k, 0)
        prefix_counts[running] += 1
    return total


def num_subarrays_with_sum(nums, goal):
    """Return the number of contiguous subarrays of a binary array summing to ``goal``."""
    return subarray_sum(nums, goal)


def unique_occurrences(arr):
    """Return True if every distinct value occurs a different number of times."""
    counts = list(Counter(arr).values())
    return len(set(counts)) == len(counts)


def find_difference(nums1, nums2):
    """Return ``[only_in_first, only_in_second]`` as lists of distinct values in first-seen order."""
    first = dict.fromkeys(nums1)
    second = dict.fromkeys(nums2)
    return [
        [value for value in first if value not in second],
        [value for value in second if value not in first],
    ]