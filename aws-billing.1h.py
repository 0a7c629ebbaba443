#!/usr/bin/env python3
# <bitbar.title>AWS Billing</bitbar.title>
# <bitbar.version>v0.1.0</bitbar.version>
# <bitbar.desc>Month-to-date AWS estimated charges per service.</bitbar.desc>
# <bitbar.dependencies>python3,awscli</bitbar.dependencies>
"""
AWS Billing menu-bar plugin.

Drop this file into the BitBar/xbar plugins directory; the ``1h`` in the name
sets the refresh interval. It is a thin wrapper around the billing_bar package.
"""

import sys

from billing_bar.cloudwatch_billing import main

if __name__ == "__main__":
    sys.exit(main())
