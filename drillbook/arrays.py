"""Array manipulations: two-pointer scans, in-place edits and simple reductions."""

import math


def max_area(height):
    """Return the largest water area between two lines of ``height``."""
    left, right = 0, len(height) - 1
    best = 0
    while left < right:
        best = max(best, min(height[left], height[right]) * (right - left))
        if height[left] < height[right]:
            left += 1
        else:
            right -= 1
    return best


def remove_element(nums, val):
    """Move the values other than ``val`` to the front of ``nums`` and return their count.

    Positions after the returned count keep their previous contents.
    """
    kept = [value for value in nums if value != val]
    nums[: len(kept)] = kept
    return len(kept)


def sort_colors(nums):
    """Sort ``nums`` in place."""
    nums.sort()


def merge_sorted(nums1, m, nums2, n):
    """Merge the first ``n`` values of ``nums2`` into ``nums1`` after its first ``m`` values.

    ``nums1`` is sorted in place and must hold at least ``m + n`` slots.
    """
    if len(nums1) < m + n:
        raise ValueError(f"nums1 has {len(nums1)} slots, needs {m + n}")
    nums1[m : m + n] = nums2[:n]
    nums1.sort()


def max_profit(prices):
    """Return the best profit from one buy followed by one later sell, or 0."""
    if not prices:
        raise ValueError("max_profit needs at least one price")
    lowest = prices[0]
    best = 0
    for price in prices[1:]:
        best = max(best, price - lowest)
        lowest = min(lowest, price)
    return best


def increasing_triplet(nums):
    """Return True if ``nums`` has a strictly increasing subsequence of length three."""
    first = second = math.inf
    for value in nums:
        if value <= first:
            first = value
        elif value <= second:
            second = value
        else:
            return True
    return False


def third_max(nums):
    """Return the third largest distinct value, or the largest if there are fewer than three."""
    if not nums:
        raise ValueError("third_max of an empty sequence")
    distinct = sorted(set(nums), reverse=True)
    return distinct[2] if len(distinct) >= 3 else distinct[0]


def array_pair_sum(nums):
    """Return the largest possible sum of pair minimums when pairing up ``nums``."""
    return sum(sorted(nums)[::2])


def can_place_flowers(flowerbed, n):
    """Return True if ``n`` flowers fit in ``flowerbed`` with no two adjacent."""
    bed = list(flowerbed)
    last = len(bed) - 1
    planted = 0
    for index, plot in enumerate(bed):
        if (
            plot == 0
            and (index == 0 or bed[index - 1] == 0)
            and (index == last or bed[index + 1] == 0)
        ):
            bed[index] = 1
            planted += 1
    return planted >= n


def pivot_index(nums):
    """Return the first index whose left and right sums are equal, or -1."""
    total = sum(nums)
    left = 0
    for index, value in enumerate(nums):
        if left == total - left - value:
            return index
        left += value
    return -1


def transpose(matrix):
    """Return the transpose of a rectangular matrix."""
    return [list(column) for column in zip(*matrix)]


def sort_by_parity(nums):
    """Return the even values followed by the odd values, each in original order."""
    return [value for value in nums if value % 2 == 0] + [
        value for value in nums if value % 2 != 0
    ]


def replace_elements(arr):
    """Return a list where each value is replaced by the largest value to its right.

    The last position becomes -1.
    """
    result = []
    greatest = -1
    for value in reversed(arr):
        result.append(greatest)
        greatest = max(greatest, value)
    result.reverse()
    return result


def kids_with_candies(candies, extra_candies):
    """Return, for each kid, whether the extra candies give them the most."""
    most = max(candies, default=-1)
    return [count + extra_candies >= most for count in candies]


def max_operations(nums, k):
    """Return the largest number of disjoint pairs summing to ``k``."""
    ordered = sorted(nums)
    left, right = 0, len(ordered) - 1
    operations = 0
    while left < right:
        pair = ordered[left] + ordered[right]
        if pair == k:
            operations += 1
            left += 1
            right -= 1
        elif pair > k:
            right -= 1
        else:
            left += 1
    return operations


def apply_operations(nums):
    """Double each value equal to its successor, zero the successor, then shift zeros to the end.

    ``nums`` is modified in place and returned.
    """
    for index in range(len(nums) - 1):
        if nums[index] == nums[index + 1]:
            nums[index] *= 2
            nums[index + 1] = 0
    non_zero = [value for value in nums if value != 0]
    nums[:] = non_zero + [0] * (len(nums) - len(non_zero))
    return nums