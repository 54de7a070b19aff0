"""Job history query service: read-only API over job, flow and HDFS usage history."""
