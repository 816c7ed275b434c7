ACCOUNT_ID = "acct-123"
BUCKET_ID = "bucket-1"
BUCKET_NAME = "holiday-photos"
FILE_ID = "4_z27c88f1d182b150646ff0b16_f1004ba650fe24e6b_d20150809_m012853_c100_v0009990_t0000"
