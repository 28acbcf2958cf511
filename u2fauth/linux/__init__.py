"""Linux hidraw support: ioctl numbers, report descriptors and devices."""