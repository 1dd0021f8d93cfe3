"""Binary-search based lookups over sorted data and monotone predicates."""

from bisect import bisect_left, bisect_right


def search_range(nums, target):
    """Return ``[first, last]`` indices of ``target`` in sorted ``nums``, or ``[-1, -1]``."""
    first = bisect_left(nums, target)
    if first == len(nums) or nums[first] != target:
        return [-1, -1]
    return [first, bisect_right(nums, target) - 1]


def search_insert(nums, target):
    """Return the index of ``target`` in sorted ``nums``, or where it would be inserted."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] < target:
            low = mid + 1
        else:
            high = mid - 1
    return low


def search_matrix(matrix, target):
    """Return True if ``target`` is in a matrix whose rows read in order form a sorted list."""
    if not matrix:
        return False
    cols = len(matrix[0])
    low, high = 0, len(matrix) * cols - 1
    while low <= high:
        mid = (low + high) // 2
        row, col = divmod(mid, cols)
        element = matrix[row][col]
        if target == element:
            return True
        if target < element:
            high = mid - 1
        else:
            low = mid + 1
    return False


def find_peak_element(nums):
    """Return the index of an element not smaller than its neighbours, or -1 if empty."""
    n = len(nums)
    low, high = 0, n - 1
    while low <= high:
        mid = (low + high) // 2
        left_ok = mid == 0 or nums[mid - 1] <= nums[mid]
        right_ok = mid == n - 1 or nums[mid + 1] <= nums[mid]
        if left_ok and right_ok:
            return mid
        if mid > 0 and nums[mid - 1] >= nums[mid]:
            high = mid - 1
        else:
            low = mid + 1
    return -1


def guess_number(n, guess):
    """Find the number picked from ``1..n`` using the ``guess`` oracle.

    ``guess(num)`` returns -1 if ``num`` is too high, 1 if too low and 0 on a hit.
    Returns -1 if the oracle never reports a hit.
    """
    low, high = 1, n
    while low <= high:
        mid = (low + high) // 2
        result = guess(mid)
        if result == 0:
            return mid
        if result == 1:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def can_split(nums, limit, parts):
    """Return True if greedily cutting ``nums`` at ``limit`` needs at most ``parts`` pieces."""
    required = 1
    running = 0
    for value in nums:
        if running + value > limit:
            required += 1
            running = value
        else:
            running += value
    return required <= parts


def split_array(nums, k):
    """Return the smallest possible largest sum when splitting ``nums`` into ``k`` parts.

    Returns -1 when no split is possible.
    """
    low, high = max(nums, default=0), sum(nums)
    answer = -1
    while low <= high:
        mid = (low + high) // 2
        if can_split(nums, mid, k):
            answer = mid
            high = mid - 1
        else:
            low = mid + 1
    return answer