import hypothesis

# First calls into torch kernels are slow enough to trip the default deadline.
hypothesis.settings.register_profile("torchkaratsuba", deadline=None)
hypothesis.settings.load_profile("torchkaratsuba")
