"""Protocol constants for the swap router."""

# Grace window added to the current time when a swap carries no deadline
DEFAULT_DEADLINE_WINDOW = 300

# Fee tiers of fee-tiered concentrated-liquidity venues, in hundredths of a bip
FEE_TIER_LOW = 500  # 0.05%
FEE_TIER_MEDIUM = 3000  # 0.30%
