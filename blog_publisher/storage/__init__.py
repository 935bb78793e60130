"""Remote storage backends for Blog Publisher."""
