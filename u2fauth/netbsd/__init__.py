"""NetBSD uhid support: file descriptors, descriptors, devices and polling discovery."""